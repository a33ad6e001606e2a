"""Cache classified output to disk, JSON round-trip."""

from linemark import process_document
from linemark.serialization import from_json, to_json

document = process_document("---\ntitle: Cached\n---\n# Cached document\n\nA | B\n--- | ---\n1 | 2")

json_str = to_json(document, indent=2)
restored = from_json(json_str)

print("Front matter:", dict(restored.front_matter))
print("Styles:", [line.style.name for line in restored])
print("JSON length:", len(json_str), "chars")
