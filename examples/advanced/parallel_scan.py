"""Scanners share no state — scan 1000 sources in parallel."""

from lexis import has_errors, scan_many

sources = [f"int v{i} = {i};\n/* note {i}\n*/ v{i} = v{i} + 1;" for i in range(1000)]

results = scan_many(sources, max_workers=8)

print(f"Scanned {len(results)} sources in parallel")
print("Tokens in first source:", len(results[0]))
print("Any errors:", any(has_errors(tokens) for tokens in results))
