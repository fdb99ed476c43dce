import unittest

from resultdesk.state.tracker_state import TrackerState


class TrackerStateTests(unittest.TestCase):
    def setUp(self):
        self.state = TrackerState()
        self.semester = self.state.semesters[0]
        self.course = self.semester.courses[0]

    def test_starts_with_one_blank_semester(self):
        self.assertEqual(len(self.state.semesters), 1)
        self.assertEqual(self.semester.name, "Semester 1")
        self.assertEqual(len(self.semester.courses), 1)
        self.assertIsNone(self.course.credit)
        self.assertEqual(self.course.grade, "A")
        self.assertEqual(self.state.aggregate().cgpa, 0)

    def test_add_semester_names_by_position(self):
        added = self.state.add_semester()
        self.assertEqual(added.name, "Semester 2")
        self.assertEqual(len(added.courses), 1)
        self.assertNotEqual(added.id, self.semester.id)

    def test_remove_last_semester_leaves_empty_collection(self):
        self.state.remove_semester(self.semester.id)
        self.assertEqual(self.state.semesters, [])
        self.assertEqual(self.state.aggregate().total_semesters, 0)

    def test_rename_semester(self):
        self.state.rename_semester(self.semester.id, "Fall 2024")
        self.assertEqual(self.semester.name, "Fall 2024")

    def test_add_and_remove_course(self):
        course = self.state.add_course(self.semester.id)
        self.assertEqual(len(self.semester.courses), 2)
        self.state.remove_course(self.semester.id, course.id)
        self.assertEqual([c.id for c in self.semester.courses], [self.course.id])

    def test_update_fields(self):
        sid, cid = self.semester.id, self.course.id
        self.state.update_course(sid, cid, "code", "cse-201")
        self.state.update_course(sid, cid, "title", "Data Structures")
        self.state.update_course(sid, cid, "credit", "3")
        self.state.update_course(sid, cid, "grade", "F")
        self.assertEqual(self.course.code, "CSE-201")
        self.assertEqual(self.course.title, "Data Structures")
        self.assertEqual(self.course.credit, 3.0)
        self.assertEqual(self.course.grade, "F")
        self.assertEqual(list(self.state.aggregate().backlog_courses), [self.course])

    def test_blank_credit_unsets(self):
        sid, cid = self.semester.id, self.course.id
        self.state.update_course(sid, cid, "credit", "3")
        self.state.update_course(sid, cid, "credit", "")
        self.assertIsNone(self.course.credit)

    def test_invalid_credit_keeps_previous_value(self):
        sid, cid = self.semester.id, self.course.id
        self.state.update_course(sid, cid, "credit", "3")
        self.state.update_course(sid, cid, "credit", "abc")
        self.state.update_course(sid, cid, "credit", "-2")
        self.assertEqual(self.course.credit, 3.0)

    def test_unknown_grade_or_field_rejected(self):
        with self.assertRaises(ValueError):
            self.state.update_course(self.semester.id, self.course.id, "grade", "Z")
        with self.assertRaises(ValueError):
            self.state.update_course(self.semester.id, self.course.id, "id", "x")

    def test_unknown_ids_are_ignored(self):
        self.state.update_course("missing", self.course.id, "title", "x")
        self.assertIsNone(self.state.add_course("missing"))
        self.state.remove_course("missing", self.course.id)
        self.assertEqual(self.course.title, "")
        self.assertEqual(len(self.semester.courses), 1)

    def test_summaries_follow_edits(self):
        sid, cid = self.semester.id, self.course.id
        self.state.update_course(sid, cid, "credit", "3")
        self.assertEqual(self.state.semester_summaries()[0].gpa, 3.75)
        self.state.update_course(sid, cid, "grade", "B")
        self.assertEqual(self.state.semester_summaries()[0].gpa, 3.0)


if __name__ == "__main__":
    unittest.main()
