"""Classify a Markdown document line by line, zero config, zero deps."""

from linemark import process

lines = process("Title\n=====\n\n- first\n- second\n\n> quoted")
for line in lines:
    print(f"{line.style.name:<16} {line.text!r}")
