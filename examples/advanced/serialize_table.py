"""Hand table content to a UI as JSON, and take it back."""

from gridtables import parse
from gridtables.serialization import from_json, to_json

table = parse("+-------+-----+\n| name  | qty |\n+-------+-----+\n| apple | 3   |\n+-------+-----+")

json_str = to_json(table, indent=2)
restored = from_json(json_str)

print(json_str)
print("Original == restored:", table == restored)
