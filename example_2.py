from JsonToInsert import convert, output_path_for, write

table_name = "people"

with open("example.json", "r", encoding="utf-8") as f:
    json_text = f.read()

# Step 1: Generate the INSERT statements without touching the file system
result = convert(json_text, table_name)
if not result.ok:
    raise SystemExit(f"Conversion failed: {result.message}")

for statement in result.statements:
    print(statement)

# Step 2: Write them to people.sql in the current directory
path = write(output_path_for(table_name), result.statements)
print(f"Saved {result.count} statements to {path}")
