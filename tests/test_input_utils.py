import unittest

from summary_utils.input_utils import (
    PASTE_MODE,
    UPLOAD_MODE,
    SummaryRequest,
    assemble_request,
    build_instruction,
)
from summary_utils.languages import LANGUAGES, language_name
from summary_utils.pdf_utils import FileContent, SelectedFile


def _pdf():
    return SelectedFile(name="paper.pdf", content=FileContent(data=b"%PDF-1.4 fake"))


class TestSummaryRequest(unittest.TestCase):

    def test_text_only(self):
        request = SummaryRequest(focus_instruction="x", text_content="hello")
        self.assertIsNone(request.file_content)

    def test_file_only(self):
        request = SummaryRequest(focus_instruction="x", file_content=_pdf().content)
        self.assertIsNone(request.text_content)

    def test_both_rejected(self):
        with self.assertRaises(ValueError):
            SummaryRequest(focus_instruction="x", text_content="hello", file_content=_pdf().content)

    def test_neither_rejected(self):
        with self.assertRaises(ValueError):
            SummaryRequest(focus_instruction="x")


class TestBuildInstruction(unittest.TestCase):

    def test_language_directive_alone(self):
        self.assertEqual(build_instruction("", "en"), "Translate the final summary into English.")
        self.assertEqual(build_instruction("   ", "en"), "Translate the final summary into English.")

    def test_focus_then_directive(self):
        self.assertEqual(
            build_instruction("Focus on the methodology", "ja"),
            "Focus on the methodology. And translate the final summary into 日本語 (Japanese).",
        )

    def test_no_double_period(self):
        instruction = build_instruction("Keep it short.", "en")
        self.assertNotIn("..", instruction)
        self.assertEqual(instruction, "Keep it short. And translate the final summary into English.")

    def test_unknown_language_falls_back_to_korean(self):
        self.assertEqual(language_name("xx"), "Korean")
        self.assertTrue(build_instruction("", "xx").endswith("into Korean."))

    def test_every_language_name_present(self):
        for lang in LANGUAGES:
            self.assertIn(lang.name, build_instruction("Summarize", lang.code))


class TestAssembleRequest(unittest.TestCase):

    def test_paste_mode_builds_text_request(self):
        request = assemble_request(PASTE_MODE, "Lorem ipsum", None, "", "es")
        self.assertEqual(request.text_content, "Lorem ipsum")
        self.assertIsNone(request.file_content)
        self.assertIn("Español (Spanish)", request.focus_instruction)
        self.assertEqual(request.target_language, "es")

    def test_paste_mode_refuses_blank_text(self):
        self.assertIsNone(assemble_request(PASTE_MODE, "", None, "", "en"))
        self.assertIsNone(assemble_request(PASTE_MODE, " \n\t ", None, "", "en"))

    def test_paste_mode_ignores_selected_file(self):
        request = assemble_request(PASTE_MODE, "text", _pdf(), "", "en")
        self.assertIsNone(request.file_content)

    def test_upload_mode_requires_file(self):
        self.assertIsNone(assemble_request(UPLOAD_MODE, "some text", None, "", "en"))

    def test_upload_mode_builds_file_request(self):
        selected = _pdf()
        request = assemble_request(UPLOAD_MODE, "ignored", selected, "Results only", "ko")
        self.assertIs(request.file_content, selected.content)
        self.assertIsNone(request.text_content)
        self.assertEqual(request.focus_instruction, "Results only. And translate the final summary into 한국어.")

    def test_unknown_mode(self):
        self.assertIsNone(assemble_request("dictate", "text", None, "", "en"))


if __name__ == "__main__":
    unittest.main()
