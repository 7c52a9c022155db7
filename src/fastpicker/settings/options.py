"""Validated, immutable picker configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from jsonschema import ValidationError

from ..config import TRANSITION_DURATION_MS, TRANSITION_REVERSE_DURATION_MS
from ..domain.models import RequestType
from ..errors import InvalidMaxSelectionError, InvalidOptionsError
from .schema import merge_with_defaults, validate_options


@dataclass(frozen=True)
class PickerOptions:
    """Caller supplied configuration, fixed for the picker's lifetime.

    Construction validates every field against the options schema so that a
    bad ``max_selection`` fails before any view model is built.
    """

    max_selection: int
    selected_asset_ids: tuple[str, ...] = ()
    request_type: RequestType = RequestType.ALL
    transition_duration_ms: int = TRANSITION_DURATION_MS
    transition_reverse_duration_ms: int = TRANSITION_REVERSE_DURATION_MS

    def __post_init__(self) -> None:
        if isinstance(self.max_selection, int) and not isinstance(self.max_selection, bool):
            if self.max_selection < 1:
                raise InvalidMaxSelectionError(
                    f"max_selection must be greater than or equal to 1, got {self.max_selection}"
                )
        object.__setattr__(self, "selected_asset_ids", tuple(self.selected_asset_ids))
        try:
            object.__setattr__(self, "request_type", RequestType(self.request_type))
        except ValueError as exc:
            raise InvalidOptionsError(str(exc)) from exc
        try:
            validate_options(self.to_dict())
        except ValidationError as exc:
            raise _translate(exc) from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> PickerOptions:
        """Build options from a loose mapping, filling in defaults."""

        try:
            merged = merge_with_defaults(dict(data) if data else None)
        except ValidationError as exc:
            raise _translate(exc) from exc
        return cls(
            max_selection=merged["max_selection"],
            selected_asset_ids=tuple(merged["selected_asset_ids"]),
            request_type=RequestType(merged["request_type"]),
            transition_duration_ms=merged.get("transition_duration_ms", TRANSITION_DURATION_MS),
            transition_reverse_duration_ms=merged.get(
                "transition_reverse_duration_ms", TRANSITION_REVERSE_DURATION_MS
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_selection": self.max_selection,
            "selected_asset_ids": list(self.selected_asset_ids),
            "request_type": self.request_type.value,
            "transition_duration_ms": self.transition_duration_ms,
            "transition_reverse_duration_ms": self.transition_reverse_duration_ms,
        }

    @property
    def starts_in_multi_select(self) -> bool:
        return bool(self.selected_asset_ids)


def _translate(exc: ValidationError) -> Exception:
    if list(exc.absolute_path)[:1] == ["max_selection"]:
        return InvalidMaxSelectionError(
            f"max_selection must be an integer greater than or equal to 1: {exc.message}"
        )
    return InvalidOptionsError(exc.message)


__all__ = ["PickerOptions"]
