"""Build a processor from rule tables kept in a TOML file."""

import tomllib

from linemark import LineProcessor, ProcessorConfig

RULES = """
default_style = "BODY"

[[front_matter_rules]]
open_tag = "+++"
close_tag = "+++"
separator = "="

[[block_rules]]
start_pattern = "^~~~"
end_token = "~~~"
style = "CODEBLOCK"

[[line_rules]]
token = "!! "
style = "BLOCKQUOTE"

[[line_rules]]
token = "%%"
style = "BODY"
remove_from = "ENTIRE_LINE"
scope = "UNTIL_CLOSE"
"""

config = ProcessorConfig.from_dict(tomllib.loads(RULES))
processor = LineProcessor.from_config(config)

document = processor.process_document(
    "+++\nauthor = Ann\n+++\n!! careful\n%%\nhidden note\n%%\n~~~\nverbatim\n~~~\nplain"
)
print("Front matter:", dict(document.front_matter))
for line in document:
    print(f"{line.style.name:<12} literal={line.literal!s:<5} {line.text!r}")
