"""Domain value objects.

- Response wrappers mirror whatever the Stripe API returned.
- The amount converter turns major-unit amounts into Stripe's minor units.
"""
