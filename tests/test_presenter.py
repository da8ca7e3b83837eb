import unittest

from gradecalc.domain.logic.grading import ParseError, RangeError, evaluate_all
from gradecalc.domain.models.entities import EntryOutcome
from gradecalc.ui import presenter


class PresenterTests(unittest.TestCase):
    def test_available_aggregate(self):
        aggregate = evaluate_all([(90, 100), (40, 50)]).aggregate
        self.assertEqual(presenter.format_total(aggregate), "Total: 130.00 / 150.00")
        self.assertEqual(presenter.format_percentage(aggregate), "Percentage: 86.67%")
        self.assertEqual(presenter.format_overall(aggregate), "Overall Grade: A")

    def test_unavailable_aggregate(self):
        self.assertEqual(presenter.format_total(None), "Total: -- / --")
        self.assertEqual(presenter.format_percentage(None), "Percentage: --%")
        self.assertEqual(presenter.format_overall(None), "Overall Grade: --")
        self.assertEqual(presenter.tone_for_letter(None), presenter.TONE_NEUTRAL)

    def test_entry_labels(self):
        report = evaluate_all([(50, 100), (95, 100), ("x", 10), (11, 10)])
        labels = [presenter.format_entry(o) for o in report.per_entry]
        self.assertEqual(labels, ["Grade: F", "Grade: O", "Grade: Invalid number", "Grade: Invalid range"])
        self.assertEqual(presenter.format_entry(None), "Grade: --")

    def test_tones(self):
        self.assertEqual(presenter.tone_for_letter("F"), presenter.TONE_FAIL)
        self.assertEqual(presenter.tone_for_letter("B"), presenter.TONE_PASS)
        self.assertEqual(presenter.tone_for_outcome(EntryOutcome(error=ParseError())), presenter.TONE_ERROR)
        self.assertEqual(presenter.tone_for_outcome(EntryOutcome(error=RangeError())), presenter.TONE_ERROR)
        self.assertEqual(presenter.tone_for_outcome(None), presenter.TONE_NEUTRAL)
        passing = evaluate_all([(9, 10)]).per_entry[0]
        self.assertEqual(presenter.tone_for_outcome(passing), presenter.TONE_PASS)


if __name__ == "__main__":
    unittest.main()
