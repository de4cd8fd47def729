"""Business policy numbers shared by the calculators.

Values match what the marketing site and partner program currently publish.
"""

# Retail seat prices
RETAIL_PRICE_SIX_MONTH = 79.00
RETAIL_PRICE_ANNUAL = 119.00

# 12 athletes + 2 coaches
USERS_PER_TEAM = 14

# Partner commission
BASE_COMMISSION_RATE = 0.10
BONUS_COMMISSION_RATE = 0.15
BONUS_THRESHOLD_UNITS = 100

# Semiannual billing -> two payments per year
PAYMENTS_PER_YEAR = 2

# Profitability model
MONTHS_PER_YEAR = 12
TRANSACTIONS_PER_USER_PER_YEAR = 12
