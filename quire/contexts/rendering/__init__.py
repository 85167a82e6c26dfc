"""
Rendering Context

Responsibilities:
- Measures rendered text widths for the layout engine
- Writes a PagedDocument to PDF
- Reads the written PDF back and validates it against the layout

Owns: Font metrics, PDF generation, output management
Never: Changes layout decisions
"""
