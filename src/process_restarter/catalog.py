"""
Static restart targets and their warnings.

CATALOG maps the label shown to the user onto the argument handed to
killall. WARNINGS holds confirmation text for the destructive entries.
Both tables are checked against each other when this module is imported,
so a warning can never refer to a label that cannot be restarted.

Example:
    ```python
    catalog = TargetCatalog()
    catalog.kill_target("Audio")        # "coreaudiod"
    catalog.warning_for("WindowServer") # "This will close all open ..."
    ```
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from process_restarter.errors import CatalogError

CATALOG: Mapping[str, str] = MappingProxyType(
    {
        "Finder": "Finder",
        "Dock": "Dock",
        "SystemUIServer (e.g. Menu Bar)": "SystemUIServer",
        "Audio": "coreaudiod",
        "Bluetooth": "bluetoothd",
        "WindowServer": "-HUP WindowServer",
    }
)

WARNINGS: Mapping[str, str] = MappingProxyType(
    {
        "WindowServer": "This will close all open applications and log you out.",
    }
)


def validate_catalog(actions: Mapping[str, str], warnings: Mapping[str, str]) -> None:
    """
    Check that the two tables agree.

    Collects all problems before raising.

    Args:
        actions: Label -> kill target
        warnings: Label -> warning text

    Raises:
        CatalogError: If a warning names an unknown label, or a label has
            an empty kill target or empty warning
    """
    errors = []
    for label, target in actions.items():
        if not label or not target.strip():
            errors.append(f"'{label}' has no kill target")
    for label, text in warnings.items():
        if label not in actions:
            errors.append(f"warning for unknown label '{label}'")
        elif not text.strip():
            errors.append(f"empty warning for '{label}'")
    if errors:
        raise CatalogError("Invalid target catalog: " + "; ".join(errors))


class TargetCatalog:
    """Lookup over a validated pair of action and warning tables."""

    def __init__(
        self,
        actions: Mapping[str, str] | None = None,
        warnings: Mapping[str, str] | None = None,
    ):
        actions = CATALOG if actions is None else actions
        warnings = WARNINGS if warnings is None else warnings
        validate_catalog(actions, warnings)
        self._actions = MappingProxyType(dict(actions))
        self._warnings = MappingProxyType(dict(warnings))

    def __contains__(self, label: object) -> bool:
        return label in self._actions

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def labels(self) -> list[str]:
        return list(self._actions)

    def kill_target(self, label: str) -> str | None:
        return self._actions.get(label)

    def warning_for(self, label: str) -> str | None:
        return self._warnings.get(label)


validate_catalog(CATALOG, WARNINGS)
