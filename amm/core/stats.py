"""Counters collected while a menu is populated, and the run summary built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

SUMMARY_TYPES = ("short", "normal", "long")


@dataclass
class Stats:
    total_files: int = 0
    total_parsed_files: int = 0
    total_unclassified_files: int = 0
    total_suppressed_files: int = 0
    unparsed_files: list[str] = field(default_factory=list)
    unhandled_classifications: list[str] = field(default_factory=list)

    def add_unparsed_file(self, path: str) -> None:
        self.unparsed_files.append(path)

    def add_unhandled_classifications(self, classifications) -> None:
        for c in classifications:
            if c not in self.unhandled_classifications:
                self.unhandled_classifications.append(c)

    @property
    def total_unparsed_files(self) -> int:
        return len(self.unparsed_files)

    def short_summary(self) -> str:
        return (
            f"Total desktop files: {self.total_files} "
            f"[{self.total_parsed_files} Parsed, "
            f"{self.total_unparsed_files} Unparsed, "
            f"{self.total_suppressed_files} Suppressed]\n"
        )

    def details(self, summary_type: str = "normal") -> str:
        """Run summary at the requested verbosity: short, normal or long."""
        if summary_type not in SUMMARY_TYPES:
            raise ValueError(f"Unknown summary type: {summary_type}")

        text = self.short_summary()
        if summary_type == "short":
            return text

        text += f"Unclassified files: {self.total_unclassified_files}\n"
        if self.unparsed_files:
            text += "Unparsed files:\n"
            text += "".join(f"  {p}\n" for p in self.unparsed_files)
        if summary_type == "long" and self.unhandled_classifications:
            text += "Unhandled classifications: "
            text += ", ".join(self.unhandled_classifications) + "\n"
        return text
