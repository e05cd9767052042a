"""
Testy wstępnego oczyszczania tekstu (formatter/text_cleaner.py)
"""
from formatter.text_cleaner import clean_text, strip_residual_markers


class TestCleanText:
    """clean_text() — kroki na całym bloku tekstu"""

    def test_star_bullets_become_canonical(self):
        assert clean_text("* Apply urea\n* Water daily") == "• Apply urea\n• Water daily"

    def test_standalone_star_rule_removed(self):
        assert clean_text("Intro\n***\nMore") == "Intro\n\nMore"

    def test_spaced_star_rule_removed(self):
        assert clean_text("A\n* * *\nB") == "A\n\nB"

    def test_triple_stars_attached_to_text_kept(self):
        text = "Plant health is ***excellent***"
        assert clean_text(text) == text

    def test_horizontal_whitespace_run_collapsed(self):
        assert clean_text("dose:     50 kg") == "dose:  50 kg"

    def test_blank_line_run_collapsed(self):
        assert clean_text("a\n\n\n\nb") == "a\n\nb"

    def test_blank_lines_with_spaces_collapsed(self):
        assert clean_text("a\n  \n \n\nb") == "a\n\nb"

    def test_single_line_break_kept(self):
        assert clean_text("a\nb") == "a\nb"

    def test_colon_moved_out_of_bold_pair(self):
        assert clean_text("**Warning:** Use less water") == "**Warning**: Use less water"

    def test_bold_header_line_with_colon(self):
        assert clean_text("**Recommendations:**") == "**Recommendations**:"

    def test_orphan_stars_before_colon_removed(self):
        assert clean_text("Soil**: good") == "Soil: good"

    def test_orphan_stars_after_colon_removed(self):
        assert clean_text("Note:** water early") == "Note: water early"

    def test_stars_after_colon_opening_pair_kept(self):
        assert clean_text("Result:**good** soil") == "Result:**good** soil"

    def test_colon_normalization_is_per_line(self):
        text = "**Tip\nNext**: line"
        assert clean_text(text) == "**Tip\nNext: line"

    def test_empty_text(self):
        assert clean_text("") == ""


class TestStripResidualMarkers:
    """strip_residual_markers() — gwiazdki na brzegach linii"""

    def test_orphan_markers_on_both_ends(self):
        assert strip_residual_markers("* leftover **") == "leftover"

    def test_leading_pair_kept(self):
        assert strip_residual_markers("**Bold** text") == "**Bold** text"

    def test_trailing_pair_kept(self):
        assert strip_residual_markers("text **bold**") == "text **bold**"

    def test_triple_pair_kept(self):
        assert strip_residual_markers("***wow***") == "***wow***"

    def test_plain_text_unchanged(self):
        assert strip_residual_markers("no markers") == "no markers"

    def test_only_markers(self):
        assert strip_residual_markers("**") == ""
