"""Streaming decoder core.

WHY: The core package holds everything needed to turn save file bytes into
bricks, independent of how the results are presented.

HOW: cp1252.py maps bytes to characters, lines.py splits the source,
escape.py resolves description escapes, fields.py holds the lenient number
parsers, header.py reads the fixed prefix, records.py classifies brick
lines, and reader.py groups them into Records behind SaveReader.

RULES:
- Nothing in core imports from cli or formatters
- Every stage is lazy; no stage materializes the brick stream
"""
