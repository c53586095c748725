from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..common.headers import normalize_fields
from ..core.constants import DESIGNATION, FULL_NAME, PHOTO_URL


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class StaffRecord:
    """Thực thể miền (domain): một dòng nhân viên trên sheet của chi nhánh.

    ``row_index`` is the spreadsheet row and only identifies the record
    within its branch.
    """

    branch_name: str
    row_index: Optional[int]
    fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    is_former: bool = False

    @classmethod
    def from_payload(cls, branch_name: str, payload: Mapping[str, Any], *, is_former: bool) -> "StaffRecord":
        raw = dict(payload)
        row = raw.pop("rowIndex", None)
        try:
            row_index = int(row) if row not in (None, "") else None
        except (TypeError, ValueError):
            row_index = None
        return cls(
            branch_name=branch_name,
            row_index=row_index,
            fields=MappingProxyType(normalize_fields(raw)),
            is_former=is_former,
        )

    def get(self, header: str, default: str = "") -> str:
        value = _text(self.fields.get(header))
        return value or default

    @property
    def full_name(self) -> str:
        return self.get(FULL_NAME)

    @property
    def designation(self) -> str:
        return self.get(DESIGNATION)

    def photo_url(self, fallback: str) -> str:
        return self.get(PHOTO_URL, fallback)

    def to_dict(self, *, fallback_photo_url: str = "") -> dict:
        data = dict(self.fields)
        data["rowIndex"] = self.row_index
        data["isFormer"] = self.is_former
        data[PHOTO_URL] = self.photo_url(fallback_photo_url)
        return data


@dataclass(frozen=True)
class PhotoUpload:
    """Ảnh đã đọc từ form, gửi lên script dưới dạng data URL base64."""

    base64: str
    name: str

    def to_payload(self) -> dict:
        return {"base64": self.base64, "name": self.name}
