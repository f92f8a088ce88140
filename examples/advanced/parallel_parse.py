"""Thread safe: find tables in 1000 documents in parallel."""

from concurrent.futures import ThreadPoolExecutor

from gridtables import find_tables

docs = [f"# Doc {i}\n+---+\n| {i % 10} |\n+---+\ntext" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(find_tables, docs))

print(f"Scanned {len(results)} documents in parallel")
print("Tables in first doc:", len(results[0]))
print("Last table content:", results[-1][0].table.rows[0].cells[0].content)
