"""
Flower combination recommendations.

Responsibilities:
- Accept occasion, recipient, mood and size plus include/exclude lists.
- Put included flowers first and top up with a random draw from the rest.
- Name the result as a combination with a stable, order-derived id.
- Report an explicit "no recommendation" outcome when nothing qualifies.
"""
