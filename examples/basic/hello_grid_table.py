"""Parse a grid table and write it back, zero config, zero deps."""

from gridtables import parse, serialize_table

table = parse("+----+---+\n| ab | x |\n| cd |   |\n+----+---+")
table.rows[0].cells[1].content = "longer text"
print(serialize_table(table))
