"""Use the scanners without the parsing pipeline."""

from lemmark.scanning import scan_fence, scan_span

result = scan_span(r"{foo\|bar|baz} trailing", 0)
print("fields:", result.fields, "consumed:", result.consumed)

lines = ["::: spoiler outer", "::: spoiler inner", "x", ":::", "y", ":::"]
match = scan_fence(lines, 1)
print("label:", match.label, "consumed:", match.consumed)
print("content:", lines[match.content_start : match.content_end])
