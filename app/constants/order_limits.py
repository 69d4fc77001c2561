from decimal import Decimal

# Largest quantity accepted on a single order line.
MAX_ITEM_QUANTITY = 999

# Upper bound of a NUMERIC(10, 2) money column.
MAX_ORDER_AMOUNT = Decimal("99999999.99")
