"""Options controlling how keys are turned into filesystem paths."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class TreeOptions(BaseModel):
    """Path relaxations for a single materialization.

    Every flag defaults to False, the most restrictive setting. The model
    is frozen so one instance can be passed through the whole traversal.

    Attributes:
        allow_absolute: Whether keys may denote absolute paths. The root is
            a segment of its own, so this needs allow_separators as well.
        allow_parent: Whether keys may contain ".." segments.
        allow_separators: Whether keys may contain path separators, which
            also enables recursive directory creation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_absolute: Annotated[bool, Field(description="Allow absolute paths")] = False
    allow_parent: Annotated[bool, Field(description="Allow '..' segments")] = False
    allow_separators: Annotated[bool, Field(description="Allow path separators in keys")] = False

    def relaxed(
        self,
        *,
        allow_absolute: bool = False,
        allow_parent: bool = False,
        allow_separators: bool = False,
    ) -> "TreeOptions":
        """Return a copy with the given flags switched on.

        Flags that are already enabled stay enabled; this never tightens.
        """
        return self.model_copy(
            update={
                "allow_absolute": self.allow_absolute or allow_absolute,
                "allow_parent": self.allow_parent or allow_parent,
                "allow_separators": self.allow_separators or allow_separators,
            }
        )
