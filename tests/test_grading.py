import unittest

from resultdesk.domain.logic.grading import (
    GRADE_SCALE,
    PASS_MARK,
    effective_credit,
    grade_options,
    grade_point,
    is_course_backlog,
    parse_credit,
)
from resultdesk.domain.models.entities import Course


class GradingTests(unittest.TestCase):
    def test_grade_scale(self):
        self.assertEqual(grade_point("A+"), 4.0)
        self.assertEqual(grade_point("A"), 3.75)
        self.assertEqual(grade_point("C"), 2.25)
        self.assertEqual(grade_point("D"), PASS_MARK)
        self.assertEqual(grade_point("F"), 0.0)

    def test_unknown_grade_defaults_to_zero(self):
        self.assertEqual(grade_point("Z"), 0.0)

    def test_scale_is_read_only(self):
        with self.assertRaises(TypeError):
            GRADE_SCALE["A"] = 1.0

    def test_grade_options_keep_scale_order(self):
        labels = [label for label, _ in grade_options()]
        self.assertEqual(labels, ["A+", "A", "A-", "B+", "B", "B-", "C+", "C", "D", "F"])

    def test_parse_credit(self):
        self.assertIsNone(parse_credit(""))
        self.assertIsNone(parse_credit("   "))
        self.assertIsNone(parse_credit(None))
        self.assertEqual(parse_credit("3"), 3.0)
        self.assertEqual(parse_credit("1.5"), 1.5)
        self.assertEqual(parse_credit(0), 0.0)

    def test_parse_credit_rejects_invalid(self):
        for raw in ("abc", "-1", "nan", "inf"):
            with self.assertRaises(ValueError):
                parse_credit(raw)

    def test_effective_credit_treats_bad_values_as_unset(self):
        self.assertIsNone(effective_credit(Course("c1", credit=None)))
        self.assertIsNone(effective_credit(Course("c2", credit=float("nan"))))
        self.assertIsNone(effective_credit(Course("c3", credit=-2)))
        self.assertEqual(effective_credit(Course("c4", credit=3)), 3.0)

    def test_backlog_classification(self):
        self.assertTrue(is_course_backlog(Course("c1", credit=3, grade="F")))
        self.assertFalse(is_course_backlog(Course("c2", credit=3, grade="D")))
        self.assertFalse(is_course_backlog(Course("c3", credit=None, grade="F")))


if __name__ == "__main__":
    unittest.main()
