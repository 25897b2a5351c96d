"""
Write acknowledgments.

These mirror the result objects pymongo returns for ``insert_one``,
``update_one`` and ``delete_one`` with identifiers rendered as hex
strings.
"""

from pydantic import BaseModel, Field


class InsertAck(BaseModel):
    inserted_id: str = Field(..., examples=["6650c0ffee0000000000abcd"])


class UpdateAck(BaseModel):
    matched_count: int
    modified_count: int


class DeleteAck(BaseModel):
    """``deleted_count`` is 0 when the id did not match; that is not an error."""

    deleted_count: int
