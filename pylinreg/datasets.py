"""
Reference datasets for regression examples and tests.

Portland housing prices: living area in square feet, number of bedrooms,
and sale price for 47 houses.
"""

import numpy as np

# Columns: size (sq ft), bedrooms, price
housing = np.array([
    [2104.0, 3.0, 399900.0],
    [1600.0, 3.0, 329900.0],
    [2400.0, 3.0, 369000.0],
    [1416.0, 2.0, 232000.0],
    [3000.0, 4.0, 539900.0],
    [1985.0, 4.0, 299900.0],
    [1534.0, 3.0, 314900.0],
    [1427.0, 3.0, 198999.0],
    [1380.0, 3.0, 212000.0],
    [1494.0, 3.0, 242500.0],
    [1940.0, 4.0, 239999.0],
    [2000.0, 3.0, 347000.0],
    [1890.0, 3.0, 329999.0],
    [4478.0, 5.0, 699900.0],
    [1268.0, 3.0, 259900.0],
    [2300.0, 4.0, 449900.0],
    [1320.0, 2.0, 299900.0],
    [1236.0, 3.0, 199900.0],
    [2609.0, 4.0, 499998.0],
    [3031.0, 4.0, 599000.0],
    [1767.0, 3.0, 252900.0],
    [1888.0, 2.0, 255000.0],
    [1604.0, 3.0, 242900.0],
    [1962.0, 4.0, 259900.0],
    [3890.0, 3.0, 573900.0],
    [1100.0, 3.0, 249900.0],
    [1458.0, 3.0, 464500.0],
    [2526.0, 3.0, 469000.0],
    [2200.0, 3.0, 475000.0],
    [2637.0, 3.0, 299900.0],
    [1839.0, 2.0, 349900.0],
    [1000.0, 1.0, 169900.0],
    [2040.0, 4.0, 314900.0],
    [3137.0, 3.0, 579900.0],
    [1811.0, 4.0, 285900.0],
    [1437.0, 3.0, 249900.0],
    [1239.0, 3.0, 229900.0],
    [2132.0, 4.0, 345000.0],
    [4215.0, 4.0, 549000.0],
    [2162.0, 4.0, 287000.0],
    [1664.0, 2.0, 368500.0],
    [2238.0, 3.0, 329900.0],
    [2567.0, 4.0, 314000.0],
    [1200.0, 3.0, 299000.0],
    [852.0, 2.0, 179900.0],
    [1852.0, 4.0, 299900.0],
    [1203.0, 3.0, 239500.0],
])
housing.flags.writeable = False

# Columns: size (sq ft), price
housing_size = np.ascontiguousarray(housing[:, [0, 2]])
housing_size.flags.writeable = False

__all__ = [
    "housing",
    "housing_size",
]
