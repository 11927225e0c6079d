"""Unit tests for node identifiers and display names."""

import re

import pytest

from depdot.graph import Project, ResolvedDependency, display_name, dot_identifier, project_identifier
from depdot.graph.identity import dependency_identifier


class TestDotIdentifier:
    """Test canonical identifiers."""

    @pytest.mark.parametrize(
        "group,name,expected",
        [
            ("org.jetbrains.kotlin", "kotlin-stdlib", "orgjetbrainskotlinkotlinstdlib"),
            ("io.reactivex.rxjava2", "rxjava", "ioreactivexrxjava2rxjava"),
            ("xml-apis", "xml-apis-ext", "xmlapisxmlapisext"),
            ("Com.Example", "MyLib", "comexamplemylib"),
        ],
    )
    def test_common_coordinates(self, group, name, expected):
        assert dot_identifier(group, name) == expected

    def test_version_is_not_part_of_identity(self):
        old = ResolvedDependency(group="com.example", name="lib", version="1.0")
        new = ResolvedDependency(group="com.example", name="lib", version="2.0")

        assert dependency_identifier(old) == dependency_identifier(new) == "comexamplelib"

    def test_empty_parts_degrade(self):
        assert dot_identifier("", "lib") == "lib"
        assert dot_identifier("com.example", "") == "comexample"
        assert dot_identifier("", "") == "_k"

    @pytest.mark.parametrize(
        "group,name,expected",
        [
            ("3rdparty.libs", "lib", "_k3rdpartylibslib"),
            ("", "2fa", "_k2fa"),
            ("", "graph", "_kgraph"),
            ("", "Node", "_knode"),
            ("", "edge", "_kedge"),
            ("di", "graph", "_kdigraph"),
            ("", "sub-graph", "_ksubgraph"),
            ("", "STRICT", "_kstrict"),
        ],
    )
    def test_unsafe_results_are_prefixed(self, group, name, expected):
        assert dot_identifier(group, name) == expected

    @pytest.mark.parametrize("group,name", [("", "graph"), ("3rd", "lib"), ("", "")])
    def test_prefixed_results_are_bare_ids(self, group, name):
        identifier = dot_identifier(group, name)

        assert re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", identifier)
        assert identifier not in {"graph", "digraph", "subgraph", "node", "edge", "strict"}

    def test_prefix_does_not_collide_with_encoded_names(self):
        assert dot_identifier("", "graph") != dot_identifier("", "_kgraph")
        assert dot_identifier("", "_kgraph") == "__kgraph"

    def test_underscore_is_escaped(self):
        assert dot_identifier("com.my_org", "lib") == "commy__orglib"

    def test_other_characters_are_encoded(self):
        assert dot_identifier("com.example", "lib+extra") == "comexamplelib_x002b_extra"
        assert dot_identifier("com.exämple", "lib") == "comex_x00e4_mplelib"

    def test_encoding_keeps_distinct_names_apart(self):
        assert dot_identifier("g", "a+b") != dot_identifier("g", "a_b")
        assert dot_identifier("g", "a_b") != dot_identifier("g", "ab")
        assert dot_identifier("g", "a/b") != dot_identifier("g", "a\\b")


class TestProjectIdentifier:
    """Test project root identifiers."""

    def test_root_project(self):
        assert project_identifier(Project(name="single")) == "single"

    def test_sub_project_uses_group(self):
        assert project_identifier(Project(name="multi1", group="multi")) == "multimulti1"

    def test_project_named_like_keyword(self):
        assert project_identifier(Project(name="graph")) == "_kgraph"


class TestDisplayName:
    """Test default labels."""

    @pytest.mark.parametrize(
        "group,name,expected",
        [
            ("android.arch.persistence.room", "runtime", "persistence-room-runtime"),
            ("android.arch.core", "common", "core-common"),
            ("com.squareup.sqldelight", "runtime", "sqldelight-runtime"),
            ("org.jetbrains", "annotations", "jetbrains-annotations"),
            ("org.jetbrains.kotlin", "kotlin-stdlib", "kotlin-stdlib"),
            ("com.android.support", "support-annotations", "support-annotations"),
        ],
    )
    def test_display_name(self, group, name, expected):
        assert display_name(group, name) == expected
