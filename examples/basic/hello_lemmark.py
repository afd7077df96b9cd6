"""Parse and render spoilers and ruby text in 3 lines."""

from lemmark import parse, render

doc = parse("::: spoiler click to see more\n{漢|Kan}{字|ji}\n:::")
html = render(doc)
print(html)
