from JsonToInsert import process_json_file

# Basic Example: Convert example.json to example.sql in one step
result = process_json_file("example.json")

if result.ok:
    print(result.message)
else:
    print(f"Conversion failed ({result.kind}): {result.message}")
