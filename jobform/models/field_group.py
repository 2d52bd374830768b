"""Named tree of fields (e.g. the address sub-group)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence, Union

from jobform.errors import UnknownFieldError
from jobform.models.field_state import FieldState
from jobform.validators import ErrorKind

FieldPath = Union[str, Sequence[str]]
FormNode = Union[FieldState, "FieldGroup"]


def split_path(path: FieldPath) -> tuple[str, ...]:
    """Normalize a dotted path or sequence of names into a tuple."""
    if isinstance(path, str):
        return tuple(part for part in path.split(".") if part)
    return tuple(path)


@dataclass
class FieldGroup:
    """Mapping from child name to a field or nested group.

    Child order is preserved and only drives the order of error reporting.
    """

    name: str
    children: dict[str, FormNode] = field(default_factory=dict)

    def add(self, node: FormNode) -> FormNode:
        """Add a child node, keyed by its name."""
        self.children[node.name] = node
        return node

    def get(self, path: FieldPath) -> FormNode:
        """Resolve a path to a field or group.

        Raises:
            UnknownFieldError: If any segment of the path does not exist
        """
        parts = split_path(path)
        if not parts:
            raise UnknownFieldError(".".join(parts))
        node: FormNode = self
        for part in parts:
            if not isinstance(node, FieldGroup) or part not in node.children:
                raise UnknownFieldError(
                    ".".join(parts),
                    available=[p for p, _ in self.iter_fields()],
                )
            node = node.children[part]
        return node

    def get_field(self, path: FieldPath) -> FieldState:
        """Resolve a path that must end in a field, not a group."""
        node = self.get(path)
        if not isinstance(node, FieldState):
            raise UnknownFieldError(".".join(split_path(path)))
        return node

    def replace(self, path: FieldPath, node: FieldState) -> None:
        """Swap the field at ``path`` for ``node``."""
        parts = split_path(path)
        parent = self.get(parts[:-1]) if len(parts) > 1 else self
        if not isinstance(parent, FieldGroup) or parts[-1] not in parent.children:
            raise UnknownFieldError(".".join(parts))
        parent.children[parts[-1]] = node

    def iter_fields(self, prefix: tuple[str, ...] = ()) -> Iterator[tuple[str, FieldState]]:
        """Walk every leaf field, yielding ``(dotted_path, field)``."""
        for name, node in self.children.items():
            if isinstance(node, FieldGroup):
                yield from node.iter_fields(prefix + (name,))
            else:
                yield ".".join(prefix + (name,)), node

    def mark_all_touched(self) -> None:
        """Mark every field touched, however deeply nested."""
        for _, field_state in self.iter_fields():
            field_state.mark_touched()

    def errors(self) -> dict[str, list[ErrorKind]]:
        """Errors for every invalid field, keyed by dotted path."""
        return {
            path: field_state.error_list
            for path, field_state in self.iter_fields()
            if not field_state.is_valid
        }

    def visible_errors(self) -> dict[str, list[ErrorKind]]:
        """Errors for touched, invalid fields only."""
        return {
            path: field_state.visible_errors
            for path, field_state in self.iter_fields()
            if field_state.visible_errors
        }

    def is_valid(self) -> bool:
        return all(f.is_valid for _, f in self.iter_fields())

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-dict copy of the current values."""
        result: dict[str, Any] = {}
        for name, node in self.children.items():
            if isinstance(node, FieldGroup):
                result[name] = node.to_dict()
            else:
                result[name] = node.value
        return result
