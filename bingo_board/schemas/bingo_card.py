"""Marshmallow schemas for the bingo card and its request payloads."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates

from bingo_board.constants import TOTAL_CELLS
from bingo_board.repositories.record import BingoCard
from bingo_board.services.card_validation import validate_card

CELL_INDEX_ERROR = f"Invalid cellIndex. Must be a number between 0 and {TOTAL_CELLS - 1}"


class BingoCardSchema(Schema):
    """Wire and storage layout of a card.

    The same layout is used for API responses and for the JSON documents the
    file and s3 backends write, so ``load`` rebuilds a :class:`BingoCard`
    with a real ``datetime`` and rejects malformed stored records.
    """

    id = fields.Str(required=True)
    cells = fields.List(fields.Str(), required=True)
    marked_cells = fields.List(fields.Int(strict=True), data_key="markedCells", load_default=list)
    updated_at = fields.AwareDateTime(data_key="updatedAt", required=True, default_timezone=None)

    @post_load
    def _make_card(self, data, **kwargs):  # type: ignore[no-untyped-def]
        try:
            return BingoCard.build(
                card_id=data["id"],
                cells=data["cells"],
                marked_cells=data["marked_cells"],
                updated_at=data["updated_at"],
            )
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc


class CardUpdateSchema(Schema):
    """Validate the admin's replace-cell-text payload."""

    class Meta:
        unknown = EXCLUDE

    error_messages = {"type": "Cells must be an array"}

    cells = fields.Raw(
        required=True,
        allow_none=True,
        error_messages={"required": "Cells must be an array"},
    )

    @validates("cells")
    def _validate_cells(self, value, **kwargs):  # type: ignore[no-untyped-def]
        result = validate_card(value)
        if not result.valid:
            raise ValidationError(str(result.error))


class CellToggleSchema(Schema):
    """Validate a toggle payload: a JSON integer in [0, 24]."""

    class Meta:
        unknown = EXCLUDE

    # A body that is not a JSON object (e.g. `5` or `[]`) gets the same message.
    error_messages = {"type": CELL_INDEX_ERROR}

    cell_index = fields.Integer(
        data_key="cellIndex",
        required=True,
        strict=True,
        validate=validate.Range(min=0, max=TOTAL_CELLS - 1, error=CELL_INDEX_ERROR),
        error_messages={"required": CELL_INDEX_ERROR, "null": CELL_INDEX_ERROR, "invalid": CELL_INDEX_ERROR},
    )


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    password = fields.Str(required=True)
