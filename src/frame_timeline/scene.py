"""Host hierarchy nodes targeted by frame endpoints."""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class SceneNode:
    """
    One node of the host object hierarchy.

    Nodes compare by identity, the same way host objects do. A node with
    ``is_root`` set marks the top of an animatable hierarchy; binding paths
    are computed relative to it.
    """

    name: str
    parent: "SceneNode | None" = None
    is_root: bool = False
    material_slots: tuple[str, ...] = ()
    children: list["SceneNode"] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.parent is not None and self not in self.parent.children:
            self.parent.children.append(self)

    def add_child(
        self,
        name: str,
        *,
        is_root: bool = False,
        material_slots: tuple[str, ...] = (),
    ) -> "SceneNode":
        """Create a child node and return it."""
        return SceneNode(name, parent=self, is_root=is_root, material_slots=material_slots)

    @property
    def slot_count(self) -> int:
        return len(self.material_slots)

    def ancestors(self) -> Iterator["SceneNode"]:
        """Yield this node and then each parent up to the top of the hierarchy."""
        current: SceneNode | None = self
        while current is not None:
            yield current
            current = current.parent

    @property
    def full_path(self) -> str:
        return "/".join(reversed([node.name for node in self.ancestors()]))

    def __repr__(self) -> str:
        return f"SceneNode({self.full_path!r})"
