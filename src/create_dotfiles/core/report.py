"""Per-entry outcomes and the run report."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutcomeStatus(Enum):
    """Result of syncing one entry."""

    COPIED = "OK"
    SKIPPED = "SKIP"
    FAILED = "FAIL"


_STYLES: Dict[OutcomeStatus, str] = {
    OutcomeStatus.COPIED: "green",
    OutcomeStatus.SKIPPED: "yellow",
    OutcomeStatus.FAILED: "red",
}


@dataclass(frozen=True)
class CopyOutcome:
    """Outcome of one copy attempt."""

    status: OutcomeStatus
    reason: Optional[str] = None

    @classmethod
    def copied(cls) -> CopyOutcome:
        return cls(OutcomeStatus.COPIED)

    @classmethod
    def skipped(cls, reason: str) -> CopyOutcome:
        return cls(OutcomeStatus.SKIPPED, reason)

    @classmethod
    def failed(cls, reason: str) -> CopyOutcome:
        return cls(OutcomeStatus.FAILED, reason)

    @property
    def tag(self) -> str:
        return self.status.value

    def format(self, entry: str) -> str:
        """Format as a console line, e.g. ``[FAIL] .zshrc: reason``."""
        style = _STYLES[self.status]
        line = f"  [{style}]\\[{self.tag}][/{style}] {escape(entry)}"
        if self.reason:
            line += f": {escape(self.reason)}"
        return line


@dataclass
class SyncReport:
    """Ordered ``(entry, outcome)`` pairs of one backup or restore run."""

    operation: str
    results: List[Tuple[str, CopyOutcome]] = field(default_factory=list)

    def add(self, entry: str, outcome: CopyOutcome) -> None:
        self.results.append((entry, outcome))

    def __iter__(self) -> Iterator[Tuple[str, CopyOutcome]]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def outcome(self, entry: str) -> Optional[CopyOutcome]:
        """Return the outcome of the first occurrence of ``entry``."""
        for name, outcome in self.results:
            if name == entry:
                return outcome
        return None

    def count(self, status: OutcomeStatus) -> int:
        return sum(1 for _, outcome in self.results if outcome.status is status)

    @property
    def copied(self) -> int:
        return self.count(OutcomeStatus.COPIED)

    @property
    def skipped(self) -> int:
        return self.count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(OutcomeStatus.FAILED)

    def summary(self) -> str:
        return f"{self.copied} copied, {self.skipped} skipped, {self.failed} failed"

    def render(self, console: Console) -> None:
        """Print the report as a table followed by the summary line."""
        if self.results:
            table = Table(title=f"{self.operation.capitalize()} Summary")
            table.add_column("Entry", style="cyan")
            table.add_column("Status")
            table.add_column("Details")
            for entry, outcome in self.results:
                style = _STYLES[outcome.status]
                table.add_row(
                    escape(entry),
                    f"[{style}]{outcome.tag}[/{style}]",
                    escape(outcome.reason or ""),
                )
            console.print(table)
        console.print(f"[bold]{self.summary()}")
