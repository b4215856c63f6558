"""
Drink pairing engine.

Responsibilities:
- Map a free-text dish name to flavour descriptors via a keyword table.
- Score every catalogue drink with additive, order-independent rules.
- Keep alcoholic and alcohol-free options in every result.
- Run the generative recommender first and fall back to the rules on failure.
"""
