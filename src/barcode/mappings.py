"""
Per-decode bookkeeping of which digits produced which field.
"""

from collections.abc import Iterable, Mapping

from src.models.explanation import (
    DigitMapping,
    ExplanationKind,
    MappedField,
    Param,
    ParamValue,
)


class DigitMappingBuilder:
    """
    Collects DigitMapping entries while a decoder runs.

    Later writes to the same field replace earlier ones, so a branch can
    refine a provisional mapping. Source indices are shifted by `offset`
    so they point into the barcode the caller actually supplied.
    """

    def __init__(self, offset: int = 0):
        self.offset = offset
        self._mappings: dict[str, DigitMapping] = {}

    def set(
        self,
        field: MappedField,
        indices: Iterable[int],
        kind: ExplanationKind,
        params: Mapping[Param, ParamValue] | None = None,
    ) -> None:
        """Record the provenance of one field."""
        self._mappings[field.value] = DigitMapping(
            source_indices=tuple(index - self.offset for index in indices),
            explanation_kind=kind,
            explanation_params=dict(params or {}),
        )

    def indices(self, field: MappedField) -> tuple[int, ...]:
        """Indices already recorded for a field, in the caller's numbering."""
        mapping = self._mappings.get(field.value)
        if mapping is None:
            return ()
        return mapping.source_indices

    def update(self, mappings: Mapping[str, DigitMapping]) -> None:
        self._mappings.update(mappings)

    def build(self) -> dict[str, DigitMapping]:
        return dict(self._mappings)
