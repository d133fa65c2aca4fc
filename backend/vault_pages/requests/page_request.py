# vault_pages/requests/page_request.py
from typing import Annotated, Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError as PydanticValidationError

from vault_pages.domain.lifecycle.page import Statuses
from vault_pages.models.page import Page
from vault_pages.repositories import pages

SLUG_PATTERN = r"^[a-z0-9]+(?:[-_/][a-z0-9]+)*$"


class PageFields(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Only the identifying fields are trimmed; page content is kept verbatim
    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
    slug: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200, pattern=SLUG_PATTERN)]
    source: str = ""
    keywords: str = Field(default="", max_length=255)
    description: str = Field(default="", max_length=500)
    meta_tags: str = ""
    status: Optional[str] = None


class PageRequest:
    """
    Validated page form.

    Besides the field rules, checks the status against the configured set
    and that the slug is not taken by another live page. The page being
    edited, if any, is passed as ``entity`` so its own slug is not a conflict.
    """

    def __init__(self, data: Mapping[str, Any], *, statuses: Statuses, entity: Optional[Page] = None):
        self.data = dict(data)
        self.statuses = statuses
        self.entity = entity
        self._fields: Optional[Dict[str, Any]] = None
        self._errors: Optional[Dict[str, str]] = None

    def is_valid(self) -> bool:
        if self._errors is None:
            self._validate()
        return not self._errors

    def get_errors(self) -> Dict[str, str]:
        self.is_valid()
        return dict(self._errors)

    def get_fields(self) -> Dict[str, Any]:
        if not self.is_valid():
            raise ValueError("Invalid page request has no fields")
        return dict(self._fields)

    def _validate(self) -> None:
        errors: Dict[str, str] = {}

        try:
            parsed = PageFields.model_validate(self.data)
        except PydanticValidationError as exc:
            for error in exc.errors():
                field = ".".join(str(part) for part in error["loc"]) or "__root__"
                errors.setdefault(field, error["msg"])
            self._errors, self._fields = errors, None
            return

        # Fields left out of the form keep their current value
        fields = parsed.model_dump(exclude_unset=True)

        if fields.get("status") is None:
            fields.pop("status", None)
        elif fields["status"] not in self.statuses:
            errors["status"] = "Unknown page status."

        if pages.find_by_slug(fields["slug"], exclude=self.entity) is not None:
            errors["slug"] = "Slug already exists."

        self._errors = errors
        self._fields = None if errors else fields
