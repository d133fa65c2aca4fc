from typing import Dict, Iterator, Mapping, Optional

from flask import current_app

from vault_pages.domain.exceptions import InvalidStatus


class Statuses:
    """
    Labeled set of page statuses.

    Status is a label, not a workflow gate: any recognised status may
    follow any other.
    """

    def __init__(self, labels: Mapping[str, str], default: Optional[str] = None):
        if not labels:
            raise ValueError("At least one page status must be configured")

        self._labels: Dict[str, str] = dict(labels)
        self.default = default or next(iter(self._labels))

        if self.default not in self._labels:
            raise ValueError(f"Default status {self.default!r} is not a configured status")

    def __contains__(self, status) -> bool:
        return isinstance(status, str) and status in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def labels(self) -> Dict[str, str]:
        return dict(self._labels)

    def label(self, status: str) -> str:
        return self._labels.get(status, status)


def get_statuses() -> Statuses:
    return Statuses(
        current_app.config["PAGE_STATUSES"],
        default=current_app.config.get("DEFAULT_PAGE_STATUS"),
    )


def assert_page_status(status, statuses: Optional[Statuses] = None) -> None:
    """
    Guards status changes.
    Single source of truth for what counts as a recognised status.
    """
    statuses = statuses or get_statuses()

    if status not in statuses:
        raise InvalidStatus(status)
