"""Scan a Java snippet and print the report — zero config, zero deps."""

from lexis import render_report, scan

tokens = scan('int answer = 42; // the answer\nString s = "unterminated;')
print(render_report(tokens), end="")
