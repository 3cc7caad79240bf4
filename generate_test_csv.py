#!/usr/bin/env python3
import pandas as pd

rows = [
    # Two orders, whole amounts
    ("Kaio", "10"),
    ("Kaio", "10"),
    # Cents + currency noise
    ("Cents Example", "$1,234.50"),
    ("Cents Example", "0.25"),
    # Customer listed with no orders (blank amount)
    ("Empty", ""),
    # Blank customer (should be dropped)
    ("", "99"),
    # Weird customer name (slugify test)
    ("Zip's AW Direct / Statewide Towing, Inc.", "75.25"),
]

df = pd.DataFrame(rows, columns=["Customer", "Amount"])
df.to_csv("sample_orders.csv", index=False)
print("Wrote sample_orders.csv")
