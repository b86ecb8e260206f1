import unittest
from io import StringIO
from unittest.mock import patch

from employee_tracker.utils.custom_responses import create_console
from employee_tracker.utils.exceptions import PromptExhausted
from employee_tracker.utils.helpers import validate_salary, validate_string
from employee_tracker.utils.prompts import ChoiceTable, RichPrompter, ScriptedPrompter


class ChoiceTableTest(unittest.TestCase):
    """Test cases for ChoiceTable lookups"""

    def setUp(self):
        self.choices = ChoiceTable([(1, "Engineering"), (2, "Sales")])

    def test_lookups_both_ways(self):
        self.assertEqual(self.choices.label_for(2), "Sales")
        self.assertEqual(self.choices.key_for("Engineering"), 1)
        self.assertEqual(self.choices.keys(), [1, 2])
        self.assertEqual(len(self.choices), 2)
        self.assertIn(1, self.choices)

    def test_unknown_label_raises_key_error(self):
        with self.assertRaises(KeyError):
            self.choices.key_for("Legal")

    def test_with_extra_leaves_original_untouched(self):
        extended = self.choices.with_extra("create", "Create Department")
        self.assertEqual(extended.labels(), ["Engineering", "Sales", "Create Department"])
        self.assertEqual(self.choices.labels(), ["Engineering", "Sales"])

    def test_duplicate_label_resolves_to_first_key(self):
        choices = ChoiceTable([(1, "Jane Doe"), (2, "Jane Doe")])
        self.assertEqual(choices.key_for("Jane Doe"), 1)
        self.assertEqual(len(choices), 2)


class ScriptedPrompterTest(unittest.TestCase):
    """Test cases for ScriptedPrompter"""

    def setUp(self):
        self.output = StringIO()
        self.console = create_console(self.output)

    def test_invalid_answer_is_reprompted(self):
        prompter = ScriptedPrompter(["   ", "Engineer", "abc", "-5", "75000"], self.console)
        self.assertEqual(prompter.ask_text("Name?", validate_string), "Engineer")
        self.assertEqual(prompter.ask_text("Salary?", validate_salary), 75000.0)
        self.assertIn("Please enter a value.", self.output.getvalue())
        self.assertIn("Please enter a non-negative number.", self.output.getvalue())

    def test_choice_answered_by_label(self):
        prompter = ScriptedPrompter(["Sales"], self.console)
        choices = ChoiceTable([(1, "Engineering"), (2, "Sales")])
        self.assertEqual(prompter.ask_choice("Department?", choices), 2)
        self.assertEqual(prompter.asked, ["Department?"])

    def test_unknown_choice_raises_value_error(self):
        prompter = ScriptedPrompter(["Legal"], self.console)
        with self.assertRaises(ValueError):
            prompter.ask_choice("Department?", ChoiceTable([(1, "Engineering")]))

    def test_exhausted_raises_eof(self):
        prompter = ScriptedPrompter([], self.console)
        with self.assertRaises(PromptExhausted):
            prompter.ask_text("Name?")
        with self.assertRaises(EOFError):
            prompter.ask_text("Name?")


class RichPrompterTest(unittest.TestCase):
    """Test cases for the terminal prompter, fed through stdin"""

    def setUp(self):
        self.output = StringIO()
        self.prompter = RichPrompter(create_console(self.output))

    def test_choice_refuses_out_of_range_number(self):
        """A number picks the row key, not its label"""
        choices = ChoiceTable([(10, "A"), (20, "B")])
        with patch("sys.stdin", StringIO("9\n2\n")):
            key = self.prompter.ask_choice("Pick one", choices)
        self.assertEqual(key, 20)
        printed = self.output.getvalue()
        self.assertIn("1. A", printed)
        self.assertIn("2. B", printed)
        self.assertIn("Please select one of the available options", printed)

    def test_salary_reprompted_until_valid(self):
        with patch("sys.stdin", StringIO("abc\n-1\n500\n")):
            salary = self.prompter.ask_text("Salary?", validate_salary)
        self.assertEqual(salary, 500.0)
        self.assertEqual(self.output.getvalue().count("Please enter a non-negative number."), 2)

    def test_blank_text_reprompted(self):
        with patch("sys.stdin", StringIO("\n   \n Engineering \n")):
            name = self.prompter.ask_text("Name?", validate_string)
        self.assertEqual(name, "Engineering")
        self.assertEqual(self.output.getvalue().count("Please enter a value."), 2)
