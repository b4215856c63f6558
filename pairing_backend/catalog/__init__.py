"""
Drink catalogue package.

Responsibilities:
- Hold the seed set of British drinks (alcoholic and non-alcoholic).
- Persist the catalogue as CSV and load it back with stable ids.
- Expose read-only lookups used by the pairing engine and the API.
"""
