import sqlite3
import sys

DB = sys.argv[1] if len(sys.argv) > 1 else "dev.db"
CATEGORY = sys.argv[2] if len(sys.argv) > 2 else None

conn = sqlite3.connect(DB)
cur = conn.cursor()

print("=== Users ===")
cur.execute("SELECT user_id, username, role FROM users ORDER BY user_id")
for r in cur.fetchall():
    print({"user_id": r[0], "username": r[1], "role": r[2]})

print("\n=== Categories ===")
cur.execute("SELECT category_id, name, description FROM categories ORDER BY category_id")
for r in cur.fetchall():
    print(r)

print("\n=== Products ===")
if CATEGORY:
    cur.execute(
        "SELECT product_id, name, price, category_id, color, stock, featured FROM products WHERE category_id=? ORDER BY product_id",
        (CATEGORY,),
    )
else:
    cur.execute(
        "SELECT product_id, name, price, category_id, color, stock, featured FROM products ORDER BY product_id LIMIT 50"
    )
for r in cur.fetchall():
    print(r)

print("\n=== Profiles ===")
cur.execute("SELECT user_id, first_name, last_name, email, city FROM profiles ORDER BY user_id")
for r in cur.fetchall():
    print(r)

conn.close()
