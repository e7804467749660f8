"""Tests for preference fingerprinting."""

import itertools

from chefly.planner.fingerprint import fingerprint_payload, fingerprint_preferences
from chefly.planner.models import Preferences


class TestFingerprintStability:
    """The fingerprint ignores array ordering and nothing else."""

    def test_same_preferences_same_fingerprint(self, sample_preferences_row):
        a = Preferences.model_validate(sample_preferences_row)
        b = Preferences.model_validate(dict(sample_preferences_row))
        assert fingerprint_preferences(a) == fingerprint_preferences(b)

    def test_permuting_arrays_does_not_change_fingerprint(self, sample_preferences_row):
        base = fingerprint_preferences(Preferences.model_validate(sample_preferences_row))
        row = dict(sample_preferences_row)
        row["allergies"] = ["shellfish", "peanuts", "soy"]
        expected = fingerprint_preferences(Preferences.model_validate(row))

        for perm in itertools.permutations(["shellfish", "peanuts", "soy"]):
            permuted = dict(row, allergies=list(perm))
            assert fingerprint_preferences(Preferences.model_validate(permuted)) == expected

        reversed_row = dict(
            sample_preferences_row,
            dislikes=list(reversed(sample_preferences_row["dislikes"])),
            flavor_preferences=list(reversed(sample_preferences_row["flavor_preferences"])),
            preferred_cuisines=list(reversed(sample_preferences_row["preferred_cuisines"])),
        )
        assert fingerprint_preferences(Preferences.model_validate(reversed_row)) == base

    def test_semantic_change_changes_fingerprint(self, sample_preferences_row):
        base = fingerprint_preferences(Preferences.model_validate(sample_preferences_row))
        changed = dict(sample_preferences_row, meals_per_day=4)
        assert fingerprint_preferences(Preferences.model_validate(changed)) != base

    def test_notes_and_demographics_are_ignored(self, sample_preferences_row):
        base = fingerprint_preferences(Preferences.model_validate(sample_preferences_row))
        changed = dict(sample_preferences_row, additional_notes="new note", age=50, weight=80)
        assert fingerprint_preferences(Preferences.model_validate(changed)) == base

    def test_null_arrays_equal_empty_arrays(self, sample_preferences_row):
        with_null = dict(sample_preferences_row, dislikes=None)
        with_empty = dict(sample_preferences_row, dislikes=[])
        assert fingerprint_preferences(Preferences.model_validate(with_null)) == fingerprint_preferences(
            Preferences.model_validate(with_empty)
        )

    def test_fingerprint_is_sha256_hex(self, sample_preferences_row):
        value = fingerprint_preferences(Preferences.model_validate(sample_preferences_row))
        assert len(value) == 64
        int(value, 16)


class TestFingerprintPayload:
    def test_arrays_are_sorted(self, sample_preferences_row):
        payload = fingerprint_payload(Preferences.model_validate(sample_preferences_row))
        assert payload["dislikes"] == ["mushrooms", "olives"]
        assert payload["preferred_cuisines"] == ["italian", "mexican"]

    def test_only_prompt_fields_included(self, sample_preferences_row):
        payload = fingerprint_payload(Preferences.model_validate(sample_preferences_row))
        assert "additional_notes" not in payload
        assert "user_id" not in payload
        assert payload["meals_per_day"] == 3
