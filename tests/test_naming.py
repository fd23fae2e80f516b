"""Tests for system, star and body names."""

from starforge.utils import (
    SeededDiceRoller,
    get_body_name,
    get_star_name,
    number_to_lowercase_letter,
    pick_system_name,
)


class TestNames:
    """Test naming helpers."""

    def test_letters(self):
        """Test that letters wrap with a repeat count."""
        assert number_to_lowercase_letter(0) == "a"
        assert number_to_lowercase_letter(25) == "z"
        assert number_to_lowercase_letter(26) == "a2"

    def test_star_names(self):
        """Test that stars are numbered from 1, the Sun keeping its name."""
        assert get_star_name("Vega", 0) == "Vega 1"
        assert get_star_name("Vega", 2) == "Vega 3"
        assert get_star_name("Sol", 0, use_ours=True) == "Sun"

    def test_body_names(self):
        """Test that bodies are lettered after their star."""
        assert get_body_name("Vega 1", 0) == "Vega 1 a"
        assert get_body_name("Vega 1", 1) == "Vega 1 b"

    def test_system_names_deterministic(self):
        """Test that a seed and step always pick the same name."""
        first = pick_system_name(SeededDiceRoller("seed", "name"))
        assert first == pick_system_name(SeededDiceRoller("seed", "name"))
        assert first
