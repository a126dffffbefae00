"""Unit tests for the linear barcode composition algorithm.

A recording output captures the exact sequence of calls made by
LinearBarcode.draw so the draw order can be checked without rendering.
"""

from unittest.mock import patch

import pytest

from barcoder.core.barcode import LinearBarcode
from barcoder.core.upc import UPCABarcode
from barcoder.domain import NO_CHECKSUM, CenteredLabelLayout, ChecksumResult, Drawable, Module
from barcoder.exceptions import OutputError
from barcoder.io import Output, SizingOutput

PRE = Module((1, 1), symbol="<")
POST = Module((2, 2), symbol=">")
CHECK = Module((3, 1), symbol="#")
DATA = [Module((1, 2), symbol="a"), Module((2, 1), symbol="b")]

TEXT_HEIGHT = 7


class RecordingOutput(Output):
    """Output that records every call it receives."""

    def __init__(self, fail_on_text: bool = False) -> None:
        super().__init__()
        self.calls: list[tuple] = []
        self.fail_on_text = fail_on_text

    def begin_draw(self) -> None:
        super().begin_draw()
        self.calls.append(("begin",))

    def end_draw(self, width: int, height: int) -> None:
        super().end_draw(width, height)
        self.calls.append(("end", width, height))

    def abort_draw(self, error: BaseException) -> None:
        super().abort_draw(error)
        self.calls.append(("abort", type(error).__name__))

    def draw_module(
        self, module: Drawable, x: int, y: int, bar_width: int, bar_height: int
    ) -> int:
        self.calls.append(("module", module.symbol, x))
        return super().draw_module(module, x, y, bar_width, bar_height)

    def draw_bar(
        self, x: int, y: int, width: int, height: int, painted: bool  # noqa: ARG002
    ) -> int:
        return width

    def draw_text(self, text: str, layout: CenteredLabelLayout) -> int:
        if self.fail_on_text:
            raise OutputError("text failed")
        self.calls.append(("text", text, layout))
        return TEXT_HEIGHT


class StubBarcode(LinearBarcode):
    """Barcode with fixed parts, for exercising the draw order."""

    def __init__(
        self,
        pre_amble: Drawable | None = PRE,
        post_amble: Drawable | None = POST,
        checksum: ChecksumResult = CHECK,
    ) -> None:
        super().__init__("stub")
        self._pre_amble = pre_amble
        self._post_amble = post_amble
        self._checksum = checksum

    def get_pre_amble(self) -> Drawable | None:
        return self._pre_amble

    def get_post_amble(self) -> Drawable | None:
        return self._post_amble

    def encode_data(self) -> list[Module]:
        return list(DATA)

    def calculate_checksum(self) -> ChecksumResult:
        return self._checksum


def _kinds(output: RecordingOutput) -> list[str]:
    return [call[0] if call[0] != "module" else call[1] for call in output.calls]


class TestDrawOrder:
    """Tests for the order of output calls."""

    def test_full_order(self) -> None:
        """Test preamble, data, checksum, postamble, label, end."""
        output = RecordingOutput()
        StubBarcode().draw(output, bar_width=1)
        assert _kinds(output) == ["begin", "<", "a", "b", "#", ">", "text", "end"]

    def test_begin_and_end_once(self) -> None:
        """Test a session is opened and closed exactly once."""
        output = RecordingOutput()
        StubBarcode().draw(output)
        kinds = _kinds(output)
        assert kinds.count("begin") == 1
        assert kinds.count("end") == 1
        assert not output.in_session

    def test_absent_ambles_make_no_calls(self) -> None:
        """Test a missing preamble or postamble produces no output call."""
        output = RecordingOutput()
        StubBarcode(pre_amble=None, post_amble=None).draw(output)
        assert _kinds(output) == ["begin", "a", "b", "#", "text", "end"]

    def test_no_checksum_makes_no_call(self) -> None:
        """Test NO_CHECKSUM is skipped."""
        output = RecordingOutput()
        StubBarcode(checksum=NO_CHECKSUM).draw(output)
        assert _kinds(output) == ["begin", "<", "a", "b", ">", "text", "end"]

    def test_no_text(self) -> None:
        """Test the label is skipped when text drawing is off."""
        output = RecordingOutput()
        StubBarcode().draw(output, draw_text=False)
        assert "text" not in _kinds(output)

    def test_cursor_advances(self) -> None:
        """Test each module starts where the previous one ended."""
        output = RecordingOutput()
        StubBarcode().draw(output, x=5, bar_width=2)
        xs = [call[2] for call in output.calls if call[0] == "module"]
        # widths in units: 2, 3, 3, 4, 4
        assert xs == [5, 9, 15, 21, 29]


class TestDrawResult:
    """Tests for the size returned and reported by draw."""

    def test_size_with_label(self) -> None:
        """Test width is the sum of module widths and height adds the label."""
        output = RecordingOutput()
        width, height = StubBarcode().draw(output, bar_width=2, bar_height=40)
        assert width == (2 + 3 + 3 + 4 + 4) * 2
        assert height == 40 + TEXT_HEIGHT
        assert output.calls[-1] == ("end", width, height)

    def test_size_without_label(self) -> None:
        """Test height is the bar height when no label is drawn."""
        width, height = StubBarcode().draw(RecordingOutput(), bar_height=25, draw_text=False)
        assert height == 25

    def test_offset_does_not_change_size(self) -> None:
        """Test drawing at an offset reports the same size."""
        at_origin = StubBarcode().draw(RecordingOutput())
        offset = StubBarcode().draw(RecordingOutput(), x=10, y=20)
        assert at_origin == offset

    def test_label_layout(self) -> None:
        """Test the label is centred under the full drawn width at the bar bottom."""
        output = RecordingOutput()
        width, _ = StubBarcode().draw(output, x=3, y=4, bar_width=1, bar_height=30)
        _, text, layout = next(call for call in output.calls if call[0] == "text")
        assert text == "stub"
        assert layout == CenteredLabelLayout(3, 34, width)

    def test_upca_size(self) -> None:
        """Test a UPC-A symbol is 117 units wide including margins."""
        width, height = UPCABarcode("03600029145").draw(
            SizingOutput(), bar_width=1, bar_height=50, draw_text=False
        )
        assert (width, height) == (117, 50)

    def test_size_method_matches_draw(self) -> None:
        """Test size() reports what draw() on a sizing output reports."""
        barcode = UPCABarcode("03600029145")
        assert barcode.size(bar_width=3) == barcode.draw(SizingOutput(), bar_width=3)

    def test_draw_writes_nothing_to_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test drawing and sizing print nothing when logging is not configured."""
        barcode = UPCABarcode("03600029145")
        barcode.size()
        barcode.draw(RecordingOutput())
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestDrawFailure:
    """Tests for error handling inside a draw session."""

    def test_error_aborts_session(self) -> None:
        """Test a failing output call aborts the session and propagates."""
        output = RecordingOutput(fail_on_text=True)
        with pytest.raises(OutputError, match="text failed"):
            StubBarcode().draw(output)
        kinds = _kinds(output)
        assert kinds[-1] == "abort"
        assert "end" not in kinds
        assert not output.in_session

    def test_error_in_draw_module_aborts(self) -> None:
        """Test a failure while drawing bars also aborts the session."""
        output = RecordingOutput()
        with patch.object(output, "draw_bar", side_effect=OutputError("bars failed")):
            with pytest.raises(OutputError, match="bars failed"):
                StubBarcode().draw(output)
        assert output.calls[-1] == ("abort", "OutputError")

    def test_output_reusable_after_abort(self) -> None:
        """Test an aborted output can open a new session."""
        output = RecordingOutput(fail_on_text=True)
        with pytest.raises(OutputError):
            StubBarcode().draw(output)
        output.fail_on_text = False
        StubBarcode().draw(output)
        assert output.calls[-1][0] == "end"
