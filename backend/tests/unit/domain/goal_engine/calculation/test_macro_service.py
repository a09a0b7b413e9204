"""Unit tests for MacroService."""

from domain.goal_engine.calculation.macro_service import MacroService


class TestMacroService:
    """Test weight-based protein/fat and carb fill."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MacroService()

    def test_maintenance_split(self):
        """Test split for 70 kg at 2507 kcal with default ratios."""
        macros = self.service.calculate(2507, 70.0, 1.8, 0.9)

        # Protein: 70 * 1.8 = 126 g = 504 kcal
        assert macros.protein_g == 126
        # Fat: 70 * 0.9 = 63 g = 567 kcal
        assert macros.fat_g == 63
        # Carbs: (2507 - 504 - 567) / 4 = 359
        assert macros.carbs_g == 359

    def test_carbs_round_half_away(self):
        """Test 886 / 4 = 221.5 rounds to 222."""
        macros = self.service.calculate(1957, 70.0, 1.8, 0.9)

        assert macros.carbs_g == 222

    def test_protein_and_fat_track_ratios(self):
        """Test upper slider values."""
        macros = self.service.calculate(3000, 80.0, 2.4, 1.2)

        assert macros.protein_g == 192
        assert macros.fat_g == 96

    def test_protein_fat_exceeding_target_gives_zero_carbs(self):
        """Test carbs floor at zero when protein+fat overshoot."""
        macros = self.service.calculate(500, 100.0, 2.4, 1.2)

        assert macros.carbs_g == 0
        assert macros.protein_g == 240
        assert macros.fat_g == 120
        assert macros.exceeds(500)

    def test_zero_target(self):
        """Test zero calories still yields non-negative grams."""
        macros = self.service.calculate(0, 60.0, 1.2, 0.6)

        assert macros.carbs_g == 0
        assert macros.protein_g >= 0
        assert macros.fat_g >= 0

    def test_total_calories_close_to_target(self):
        """Test the split accounts for the target within rounding."""
        macros = self.service.calculate(2507, 70.0, 1.8, 0.9)

        assert abs(macros.total_calories() - 2507) <= 2
        assert not macros.exceeds(2507)
