"""
Reference resolver for generated types.

Type references are recorded by id while types are still being discovered.
Once the whole file set is known (including types folded into others and
names rewritten afterwards), the resolver points every reference at its
final target and refreshes each file's dependency set.
"""

from __future__ import annotations

from .model_nodes import GeneratedFile, TypeKind, TypeRef


class UnresolvedReferenceError(LookupError):
    """A class reference points at no known generated type."""


class ReferenceResolver:
    """Resolves class references across a file set."""

    def __init__(self, files: list[GeneratedFile]):
        """
        Initialize the resolver.

        Args:
            files: Every file of the generation run
        """
        self.files = files
        self._by_id: dict[int, GeneratedFile] = {}
        self._build_cache()

    def _build_cache(self) -> None:
        """Index files by their own id and by the ids folded into them."""
        for file in self.files:
            self._by_id[file.id] = file
            for merged_id in file.merged_ids:
                self._by_id[merged_id] = file

    def resolve(self, type_ref: TypeRef) -> GeneratedFile:
        """
        Find the file a class reference points to.

        Raises:
            UnresolvedReferenceError: If the target is unknown
        """
        target = self._by_id.get(type_ref.target_id) if type_ref.target_id is not None else None
        if target is None:
            raise UnresolvedReferenceError(f"Reference to unknown type {type_ref.name!r} (id {type_ref.target_id})")
        return target

    def fix_references(self) -> None:
        """Rewrite every class reference to its target's current id and name.

        Running it again on the same files changes nothing.
        """
        for file in self.files:
            file.references = set()
            for prop in file.properties:
                for type_ref in prop.type_ref.walk():
                    if type_ref.kind != TypeKind.CLASS:
                        continue
                    target = self.resolve(type_ref)
                    type_ref.target_id = target.id
                    type_ref.name = target.name
                    file.references.add(target.id)
