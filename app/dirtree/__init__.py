"""dirtree - materialize configuration values as directory trees.

Takes an already evaluated configuration value and writes it to disk as
directories and files, applying POSIX ownership and permission metadata.
"""

__version__ = "0.1.0"
