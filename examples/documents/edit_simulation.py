"""Edit one cell of a table inside a note and write it back."""

from gridtables import Table, find_tables, format_tables, replace_table

note = """# Groceries

+--------+-----+
| item   | qty |
+--------+-----+
| apples | 3   |
+--------+-----+

Remember the bags."""

(region,) = find_tables(note)
print(f"Table on lines {region.lineno}-{region.end_lineno}, widths {region.base_widths}")

table: Table = region.table
table.add_row()
table.rows[-1].cells[0].content = "sparkling water"
table.rows[-1].cells[1].content = "12"

# Keep the column widths the table was written with; grow where needed
updated = replace_table(note, region, table, base_widths=region.base_widths)
print(updated)
print()
print("Already canonical:", format_tables(updated) == updated)
