"""Parse 1000 docs in parallel; parsers share no mutable state."""

from concurrent.futures import ThreadPoolExecutor

from lemmark import parse

docs = [f"::: spoiler answer {i}\n{{{i}|n{i}}}\n:::" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, docs))

print(f"Parsed {len(results)} documents in parallel")
print("First spoiler label:", results[0].children[0].label)
