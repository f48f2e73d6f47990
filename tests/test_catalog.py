"""Tests for the static target catalog and its consistency check."""

import pytest

from process_restarter.catalog import CATALOG, WARNINGS, TargetCatalog, validate_catalog
from process_restarter.errors import CatalogError


class TestShippedCatalog:
    """Tests for the tables shipped with the package."""

    def test_every_warning_has_a_target(self):
        """Every warned label must be restartable."""
        for label in WARNINGS:
            assert label in CATALOG

    def test_known_targets(self):
        """Curated labels map onto their killall arguments."""
        catalog = TargetCatalog()

        assert catalog.kill_target("Dock") == "Dock"
        assert catalog.kill_target("Finder") == "Finder"
        assert catalog.kill_target("SystemUIServer (e.g. Menu Bar)") == "SystemUIServer"
        assert catalog.kill_target("Audio") == "coreaudiod"
        assert catalog.kill_target("Bluetooth") == "bluetoothd"
        assert catalog.kill_target("WindowServer") == "-HUP WindowServer"

    def test_labels_keep_display_order(self):
        """Labels are listed in the order they are declared."""
        assert TargetCatalog().labels() == [
            "Finder",
            "Dock",
            "SystemUIServer (e.g. Menu Bar)",
            "Audio",
            "Bluetooth",
            "WindowServer",
        ]

    def test_warning_lookup(self):
        """Only WindowServer carries a warning."""
        catalog = TargetCatalog()

        assert "log you out" in catalog.warning_for("WindowServer")
        assert catalog.warning_for("Dock") is None
        assert catalog.warning_for("unknown") is None

    def test_unknown_label(self):
        """Unknown labels have no target and are not contained."""
        catalog = TargetCatalog()

        assert catalog.kill_target("Nope") is None
        assert "Nope" not in catalog
        assert "Dock" in catalog
        assert len(catalog) == 6


class TestValidateCatalog:
    """Tests for validate_catalog()."""

    def test_warning_for_unknown_label_rejected(self):
        """A warning that names no action is an error."""
        with pytest.raises(CatalogError, match="unknown label 'Ghost'"):
            validate_catalog({"Dock": "Dock"}, {"Ghost": "boo"})

    def test_empty_target_rejected(self):
        with pytest.raises(CatalogError, match="has no kill target"):
            validate_catalog({"Dock": "  "}, {})

    def test_empty_warning_rejected(self):
        with pytest.raises(CatalogError, match="empty warning"):
            validate_catalog({"Dock": "Dock"}, {"Dock": ""})

    def test_collects_all_errors(self):
        """All problems are reported in one error."""
        with pytest.raises(CatalogError) as exc_info:
            validate_catalog({"Dock": ""}, {"Ghost": "boo"})

        message = str(exc_info.value)
        assert "'Dock' has no kill target" in message
        assert "unknown label 'Ghost'" in message

    def test_custom_catalog_is_validated(self):
        """TargetCatalog refuses inconsistent tables."""
        with pytest.raises(CatalogError):
            TargetCatalog(actions={"Dock": "Dock"}, warnings={"Finder": "careful"})

    def test_custom_catalog_is_copied(self):
        """Later changes to the source dict do not leak into the catalog."""
        actions = {"Dock": "Dock"}
        catalog = TargetCatalog(actions=actions, warnings={})
        actions["Finder"] = "Finder"

        assert "Finder" not in catalog
