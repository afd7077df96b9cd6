"""Property-based tests for the scanners and parser using Hypothesis.

Invariants:
1. Normalization is idempotent and leaves no escape artifacts
2. Scanners never raise on valid windows and never report a span that
   leaves the window or misses its delimiters
3. A declined span scan covers every marker up to its horizon, and the
   unclosed-fence set agrees with scan_fence
4. Parsing and rendering never crash on arbitrary input
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from lemmark import Markdown
from lemmark.scanning import find_span, find_unclosed_fences, normalize, scan_fence, scan_span
from lemmark.scanning.fence import is_fence_close, match_fence_open

# Text biased toward the characters the scanners care about
syntax_text = st.text(alphabet=st.sampled_from(list("{}|\\ \tab:\n漢")), max_size=40)
fence_lines = st.lists(
    st.sampled_from(["::: spoiler a", "::: spoiler b c", ":::", "::: ", "text", "", "  :::"]),
    max_size=12,
)


class TestNormalizeProperties:
    """Properties of normalize."""

    @given(st.text())
    def test_idempotent(self, s: str) -> None:
        assert normalize(normalize(s)) == normalize(s)

    @given(st.text())
    def test_no_escape_or_whitespace_artifacts(self, s: str) -> None:
        result = normalize(s)
        assert "\\" not in result
        assert "  " not in result
        assert result == result.strip()


class TestScanSpanProperties:
    """Properties of scan_span."""

    @given(syntax_text)
    @settings(max_examples=200)
    def test_match_is_well_formed(self, body: str) -> None:
        buffer = "{" + body
        result = scan_span(buffer, 0)
        if result is None:
            return
        assert 3 <= result.consumed <= len(buffer)
        assert buffer[result.consumed - 1] == "}"
        assert len(result.fields) == 2
        for field in result.fields:
            assert "\\" not in field

    @given(syntax_text, st.integers(min_value=0, max_value=40))
    def test_never_reads_past_window(self, body: str, cut: int) -> None:
        buffer = "{" + body
        end = min(cut, len(buffer))
        result = scan_span(buffer, 0, end)
        if result is not None:
            assert result.consumed <= end

    @given(syntax_text)
    @settings(max_examples=200)
    def test_decline_horizon_covers_later_markers(self, body: str) -> None:
        buffer = "{" + body
        result, horizon = find_span(buffer, 0)
        if result is not None:
            assert horizon == result.consumed
            return
        assert 0 <= horizon <= len(buffer)
        for pos in range(1, horizon):
            if buffer[pos] == "{":
                assert scan_span(buffer, pos) is None


class TestScanFenceProperties:
    """Properties of scan_fence."""

    @given(fence_lines)
    def test_match_ends_on_close(self, body: list[str]) -> None:
        lines = ["::: spoiler label", *body]
        result = scan_fence(lines, 1)
        if result is None:
            return
        assert 2 <= result.consumed <= len(lines)
        assert is_fence_close(lines[result.consumed - 1])
        assert result.content_end == result.consumed - 1

        # Opens and closes inside the content balance out
        depth = 0
        for line in lines[result.content_start : result.content_end]:
            if is_fence_close(line):
                depth -= 1
                assert depth >= 0
            elif match_fence_open(line) is not None:
                depth += 1
        assert depth == 0

    @given(fence_lines)
    def test_unclosed_set_agrees_with_scan(self, lines: list[str]) -> None:
        unclosed = find_unclosed_fences(lines)
        for index, line in enumerate(lines):
            if match_fence_open(line) is None:
                assert index not in unclosed
            else:
                closed = scan_fence(lines, index + 1) is not None
                assert closed == (index not in unclosed)


class TestParserProperties:
    """The full pipeline never crashes."""

    @given(syntax_text)
    @settings(max_examples=200)
    def test_render_never_crashes(self, source: str) -> None:
        html = Markdown()(source)
        assert isinstance(html, str)

    @given(fence_lines)
    def test_fenced_documents_never_crash(self, lines: list[str]) -> None:
        html = Markdown()("\n".join(["::: spoiler top", *lines]))
        assert html.count("<details>") == html.count("</details>")
