"""Read-only tool catalog keyed by tool code"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Union

from tool_rental.domain.exceptions import InvalidArgumentError
from tool_rental.domain.models import Tool
from tool_rental.domain.pricing import to_decimal


class ToolCatalog:
    """
    Immutable lookup of rentable tools.

    Populated once at construction and never mutated afterwards, so a
    single instance can be shared across concurrent checkouts.
    """

    def __init__(self, tools: Iterable[Tool]):
        by_code: Dict[str, Tool] = {}
        for tool in tools:
            if tool.tool_code in by_code:
                raise InvalidArgumentError(f"Duplicate tool code in catalog: {tool.tool_code}")
            by_code[tool.tool_code] = tool

        self._tools = MappingProxyType(by_code)
        logging.info("Tool catalog initialized", extra={"tool_count": len(by_code)})

    def find_by_code(self, tool_code: str) -> Optional[Tool]:
        """Return the tool with the given code, or None if there is none"""
        return self._tools.get(tool_code)

    def tools(self) -> List[Tool]:
        """All tools, ordered by code"""
        return [self._tools[code] for code in sorted(self._tools)]

    def __contains__(self, tool_code: object) -> bool:
        return tool_code in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ToolCatalog":
        """
        Load a catalog from a JSON list of tool objects.

        Each entry carries the Tool field names; daily_charge may be a
        string ("1.99") or a number.

        Raises:
            InvalidArgumentError: On missing fields, non-boolean charge flags
                or duplicate codes
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        try:
            return cls(_tool_from_dict(entry) for entry in raw)
        except (KeyError, TypeError, ArithmeticError) as e:
            raise InvalidArgumentError(f"Invalid tool catalog {path}: {e}") from e


def _tool_from_dict(entry: Dict[str, Any]) -> Tool:
    return Tool(
        tool_code=entry["tool_code"],
        tool_type=entry["tool_type"],
        tool_brand=entry["tool_brand"],
        daily_charge=to_decimal(entry["daily_charge"]),
        charges_on_weekday=_flag(entry, "charges_on_weekday"),
        charges_on_weekend=_flag(entry, "charges_on_weekend"),
        charges_on_holiday=_flag(entry, "charges_on_holiday"),
    )


def _flag(entry: Dict[str, Any], name: str) -> bool:
    value = entry[name]
    # JSON true/false only
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"Tool {entry.get('tool_code')}: {name} must be true or false, got {value!r}")
    return value


DEFAULT_TOOLS = (
    Tool("CHNS", "Chainsaw", "Stihl", Decimal("1.49"), True, False, True),
    Tool("LADW", "Ladder", "Werner", Decimal("1.99"), True, True, False),
    Tool("JAKD", "Jackhammer", "DeWalt", Decimal("2.99"), True, False, False),
    Tool("JAKR", "Jackhammer", "Ridgid", Decimal("2.99"), True, False, False),
)


def default_catalog() -> ToolCatalog:
    """Catalog seeded with the standard rental tools"""
    return ToolCatalog(DEFAULT_TOOLS)
