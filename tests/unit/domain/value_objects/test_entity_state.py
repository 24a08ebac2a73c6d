"""Unit tests for EntityState."""

from authcore.domain.value_objects.entity_state import EntityState


def test_toggled_flips_both_ways():
    assert EntityState.ACTIVE.toggled() is EntityState.INACTIVE
    assert EntityState.INACTIVE.toggled() is EntityState.ACTIVE


def test_values_are_lowercase_strings():
    assert EntityState("active") is EntityState.ACTIVE
    assert EntityState.INACTIVE.value == "inactive"
