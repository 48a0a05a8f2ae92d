"""Tests for bindery.bindings."""

from __future__ import annotations

import logging

import pytest

from bindery.bindings import PathBinding
from bindery.node import BindableNode
from bindery.properties import BindableProperty

# -- Test fixtures --


class Person(BindableNode):
    name = BindableProperty(default="")


class Label(BindableNode):
    text = BindableProperty(default="", two_way=True)


class Address:
    def __init__(self, city: str):
        self.city = city


def _person(name: str) -> Person:
    p = Person("person")
    p.name = name
    return p


def _bind(context, path: str, mode: str = "oneway") -> tuple[Label, PathBinding]:
    label = Label("label")
    b = PathBinding(property_name="text", path=path, mode=mode, target=label, context=context)
    return label, b


# -- Pulling into the target --


class TestApplyToTarget:
    def test_mapping_value(self):
        label, b = _bind({"name": "Ada"}, "name")
        b.apply()
        assert label.text == "Ada"

    def test_nested_attribute(self):
        label, b = _bind({"home": Address("Lyon")}, "home.city")
        b.apply()
        assert label.text == "Lyon"

    def test_identity_path_passes_context(self):
        label, b = _bind("whole", ".")
        b.apply()
        assert label.text == "whole"

    def test_no_context_leaves_target(self):
        label, b = _bind(None, "name")
        label.text = "kept"
        b.apply()
        assert label.text == "kept"

    def test_no_target_is_noop(self):
        b = PathBinding(property_name="text", path="name", context={"name": "Ada"})
        b.apply()

    def test_missing_member_raises(self):
        _, b = _bind({"name": "Ada"}, "missing")
        with pytest.raises(ValueError, match="missing"):
            b.apply()

    def test_logs_application(self, caplog):
        _, b = _bind({"name": "Ada"}, "name")
        with caplog.at_level(logging.DEBUG, logger="bindery.bindings"):
            b.apply()
        assert "Binding 'text' <- 'name'" in caplog.text


# -- Following the source --


class TestFollowSource:
    def test_oneway_follows_owner_changes(self):
        person = _person("Ada")
        label, b = _bind(person, "name")
        b.apply()
        person.name = "Bob"
        assert label.text == "Bob"

    def test_follows_nested_owner(self):
        person = _person("Ada")
        label, b = _bind({"person": person}, "person.name")
        b.apply()
        person.name = "Bob"
        assert label.text == "Bob"

    def test_ignores_other_members(self):
        person = _person("Ada")
        label, b = _bind(person, "name")
        b.apply()
        person.tag = "vip"
        assert label.text == "Ada"

    def test_onetime_does_not_follow(self):
        person = _person("Ada")
        label, b = _bind(person, "name", mode="onetime")
        b.apply()
        person.name = "Bob"
        assert label.text == "Ada"
        assert len(person.property_changed) == 0

    def test_apply_twice_subscribes_once(self):
        person = _person("Ada")
        _, b = _bind(person, "name")
        b.apply()
        b.apply()
        assert len(person.property_changed) == 1

    def test_new_owner_moves_subscription(self):
        first = _person("Ada")
        second = _person("Bob")
        label, b = _bind(first, "name")
        b.apply()
        b.context = second
        b.apply()
        first.name = "Changed"
        assert label.text == "Bob"
        assert len(first.property_changed) == 0
        assert len(second.property_changed) == 1

    def test_cleared_context_stops_following(self):
        person = _person("Ada")
        label, b = _bind(person, "name")
        b.apply()
        b.context = None
        b.apply()
        person.name = "Bob"
        assert label.text == "Ada"
        assert len(person.property_changed) == 0

    def test_unapply_stops_following(self):
        person = _person("Ada")
        label, b = _bind(person, "name")
        b.apply()
        b.unapply()
        person.name = "Bob"
        assert label.text == "Ada"

    def test_dispose_releases_owner(self):
        person = _person("Ada")
        _, b = _bind(person, "name")
        b.apply()
        b.dispose()
        assert len(person.property_changed) == 0
        assert b.target is None
        assert b.context is None


# -- Pushing back into the context --


class TestApplyToSource:
    def test_writes_mapping(self):
        ctx = {"name": "Ada"}
        label, b = _bind(ctx, "name", mode="twoway")
        label.__dict__["_text"] = "Eve"
        b.apply(False)
        assert ctx["name"] == "Eve"

    def test_writes_nested_attribute(self):
        home = Address("Lyon")
        label, b = _bind({"home": home}, "home.city", mode="twoway")
        label.__dict__["_text"] = "Paris"
        b.apply(False)
        assert home.city == "Paris"

    def test_identity_path_raises(self):
        label, b = _bind({"name": "Ada"}, ".", mode="twoway")
        with pytest.raises(ValueError, match="cannot write"):
            b.apply(False)

    def test_no_context_is_noop(self):
        _, b = _bind(None, "name", mode="twoway")
        b.apply(False)


class TestTwoWayRoundTrip:
    def test_edit_on_target_reaches_source(self):
        person = _person("Ada")
        label = Label("label", bindings=[PathBinding(property_name="text", path="name", mode="twoway")])
        label.context = person
        assert label.text == "Ada"

        label.text = "Eve"

        assert person.name == "Eve"
        assert label.text == "Eve"

    def test_edit_on_source_reaches_target(self):
        person = _person("Ada")
        label = Label("label", bindings=[PathBinding(property_name="text", path="name", mode="twoway")])
        label.context = person

        person.name = "Zed"

        assert label.text == "Zed"

    def test_no_feedback_notifications(self):
        person = _person("Ada")
        label = Label("label", bindings=[PathBinding(property_name="text", path="name", mode="twoway")])
        label.context = person
        person_changes = []
        label_changes = []
        person.property_changed.subscribe(lambda sender, name: person_changes.append(name))
        label.property_changed.subscribe(lambda sender, name: label_changes.append(name))

        label.text = "Eve"

        assert person_changes == ["name"]
        assert label_changes == ["text"]
