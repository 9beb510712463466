"""Tests for deriving class tags and writing them into report userdata."""

import logging
import warnings
from collections import UserDict

import pytest

from report_userdata.class_tagger import (
    derive_tags,
    extract_applied_classes,
    tag_report,
    tag_report_from_catalog,
)
from report_userdata.exceptions import MissingClassListWarning, UserdataNotAttachedError
from report_userdata.schemas import ClassTags, RunReport, TaggerConfig

APPLIED = ["role::web", "profile::base", "ntp", "role::db"]


class StubCatalog:
    """Catalog exposing ``classes`` as a method, like the agent's catalog."""

    def __init__(self, classes):
        self._classes = classes

    def classes(self):
        return list(self._classes)


class AttributeCatalog:
    def __init__(self, classes):
        self.classes = classes


@pytest.fixture
def report():
    return RunReport(host="web01.example.com")


# ============================================================================
# derive_tags
# ============================================================================

class TestDeriveTags:
    def test_sorts_and_partitions(self):
        tags = derive_tags(APPLIED)

        assert tags.classes == ["ntp", "profile::base", "role::db", "role::web"]
        assert tags.roles == ["role::db", "role::web"]
        assert tags.profiles == ["profile::base"]

    def test_empty_input(self):
        tags = derive_tags([])

        assert tags == ClassTags(classes=[], roles=[], profiles=[])

    def test_codepoint_order(self):
        tags = derive_tags(["b", "B", "a", "role::Z", "role::a"])

        assert tags.classes == ["B", "a", "b", "role::Z", "role::a"]
        assert tags.roles == ["role::Z", "role::a"]

    def test_prefix_must_match_at_start(self):
        tags = derive_tags(["base::role::web", "myprofile::x", "role:web"])

        assert tags.roles == []
        assert tags.profiles == []

    def test_does_not_mutate_input(self):
        applied = list(APPLIED)

        derive_tags(applied)

        assert applied == APPLIED

    def test_accepts_any_iterable(self):
        tags = derive_tags(name for name in APPLIED)

        assert tags.roles == ["role::db", "role::web"]

    def test_custom_prefixes(self):
        config = TaggerConfig(role_prefix="roles::", profile_prefix="site::")

        tags = derive_tags(["roles::app", "site::dns", "role::web"], config)

        assert tags.roles == ["roles::app"]
        assert tags.profiles == ["site::dns"]
        assert tags.classes == ["role::web", "roles::app", "site::dns"]

    def test_overlapping_prefixes_checked_independently(self):
        config = TaggerConfig(role_prefix="x::", profile_prefix="x::")

        tags = derive_tags(["x::a", "y"], config)

        assert tags.roles == ["x::a"]
        assert tags.profiles == ["x::a"]

    def test_rejects_bare_string(self):
        with pytest.raises(TypeError):
            derive_tags("role::web")

    def test_rejects_non_string_names(self):
        with pytest.raises(TypeError):
            derive_tags(["role::web", 3])


# ============================================================================
# tag_report
# ============================================================================

class TestTagReport:
    def test_writes_three_keys(self, report):
        tag_report(report, APPLIED)

        assert report.userdata == {
            "classes": ["ntp", "profile::base", "role::db", "role::web"],
            "roles": ["role::db", "role::web"],
            "profiles": ["profile::base"],
        }

    def test_empty_input_writes_empty_lists(self, report):
        tag_report(report, [])

        assert report.userdata["classes"] == []
        assert report.userdata["roles"] == []
        assert report.userdata["profiles"] == []

    def test_idempotent(self, report):
        tag_report(report, APPLIED)
        once = dict(report.userdata)

        tag_report(report, APPLIED)

        assert report.userdata == once

    def test_keeps_caller_keys(self, report):
        report.userdata["note"] = "x"

        tag_report(report, APPLIED)

        assert report.userdata["note"] == "x"

    def test_overwrites_previous_tags(self, report):
        tag_report(report, ["role::old"])

        tag_report(report, ["profile::new"])

        assert report.userdata["roles"] == []
        assert report.userdata["profiles"] == ["profile::new"]

    def test_returns_tags(self, report):
        tags = tag_report(report, APPLIED)

        assert isinstance(tags, ClassTags)
        assert tags.classes == report.userdata["classes"]

    def test_accepts_mutable_mapping_userdata(self):
        class HostReport:
            host = "web01"

        host_report = HostReport()
        host_report.userdata = UserDict(note="x")

        tag_report(host_report, APPLIED)

        assert host_report.userdata["roles"] == ["role::db", "role::web"]
        assert host_report.userdata["note"] == "x"

    def test_requires_attached_userdata(self, report):
        report.userdata = None

        with pytest.raises(UserdataNotAttachedError) as exc_info:
            tag_report(report, APPLIED)

        assert exc_info.value.host == "web01.example.com"


# ============================================================================
# Catalog extraction
# ============================================================================

class TestExtractAppliedClasses:
    def test_method_catalog(self):
        assert extract_applied_classes(StubCatalog(APPLIED)) == APPLIED

    def test_attribute_catalog(self):
        assert extract_applied_classes(AttributeCatalog(("ntp", "role::db"))) == ["ntp", "role::db"]

    def test_mapping_catalog(self):
        assert extract_applied_classes({"classes": ["ntp"]}) == ["ntp"]

    def test_missing_interface(self):
        assert extract_applied_classes(object()) is None
        assert extract_applied_classes({"resources": []}) is None

    def test_method_with_changed_arity(self):
        class NewCatalog:
            def classes(self, environment):
                return []

        assert extract_applied_classes(NewCatalog()) is None

    def test_unexpected_shape(self):
        assert extract_applied_classes(AttributeCatalog("role::web")) is None
        assert extract_applied_classes(AttributeCatalog(42)) is None
        assert extract_applied_classes(AttributeCatalog([{"name": "ntp"}])) is None


class TestTagReportFromCatalog:
    def test_tags_from_catalog(self, report):
        tags = tag_report_from_catalog(report, StubCatalog(APPLIED))

        assert tags.roles == ["role::db", "role::web"]
        assert report.userdata["profiles"] == ["profile::base"]

    def test_missing_class_list_warns(self, report, caplog):
        report.userdata["note"] = "x"

        with caplog.at_level(logging.WARNING, logger="report_userdata.class_tagger"):
            with pytest.warns(MissingClassListWarning, match="object"):
                result = tag_report_from_catalog(report, object())

        assert result is None
        assert report.userdata == {"note": "x"}
        assert "Could not extract classes" in caplog.text

    def test_empty_catalog_still_tags(self, report):
        with warnings.catch_warnings():
            warnings.simplefilter("error", MissingClassListWarning)
            tag_report_from_catalog(report, StubCatalog([]))

        assert report.userdata == {"classes": [], "roles": [], "profiles": []}
