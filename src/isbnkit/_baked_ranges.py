"""Pre-baked ISBN range table.

Generated by scripts/bake_range_table.py from RangeMessage.xml; do not edit.
Rules are (min, max, length): max is exclusive, length 0 marks a reserved
range.
"""
from __future__ import annotations

from isbnkit.range_table import BakedGroup

MESSAGE_SOURCE: str | None = 'International ISBN Agency'
MESSAGE_SERIAL_NUMBER: str | None = 'b5a7b5fb-1c2e-4a55-9d0c-1f3c0e6a9d2e'
MESSAGE_DATE: str = 'Mon, 2 Sep 2024 10:31:12 BST'

EAN_UCC_PREFIXES: tuple[BakedGroup, ...] = (
    ('978', 'International ISBN Agency', (
        (0, 6000000, 1),
        (6000000, 6500000, 3),
        (6500000, 6600000, 2),
        (6600000, 7000000, 0),
        (7000000, 8000000, 1),
        (8000000, 9500000, 2),
        (9500000, 9900000, 3),
        (9900000, 9990000, 4),
        (9990000, 10000000, 5),
    )),
    ('979', 'International ISBN Agency', (
        (0, 1000000, 0),
        (1000000, 1300000, 2),
        (1300000, 8000000, 0),
        (8000000, 9000000, 1),
        (9000000, 10000000, 0),
    )),
)

REGISTRATION_GROUPS: tuple[BakedGroup, ...] = (
    ('978-0', 'English language', (
        (0, 2000000, 2),
        (2000000, 2280000, 3),
        (2280000, 2290000, 4),
        (2290000, 3690000, 3),
        (3690000, 3700000, 4),
        (3700000, 6390000, 3),
        (6390000, 6398000, 4),
        (6398000, 6400000, 7),
        (6400000, 6450000, 3),
        (6450000, 6460000, 7),
        (6460000, 6480000, 3),
        (6480000, 6490000, 7),
        (6490000, 7000000, 3),
        (7000000, 8500000, 4),
        (8500000, 9000000, 5),
        (9000000, 9500000, 6),
        (9500000, 10000000, 7),
    )),
    ('978-1', 'English language', (
        (0, 100000, 3),
        (100000, 300000, 2),
        (300000, 350000, 3),
        (350000, 400000, 4),
        (400000, 500000, 2),
        (500000, 700000, 3),
        (700000, 1000000, 4),
        (1000000, 3980000, 3),
        (3980000, 5500000, 4),
        (5500000, 6500000, 5),
        (6500000, 6800000, 4),
        (6800000, 6860000, 5),
        (6860000, 7140000, 4),
        (7140000, 7170000, 3),
        (7170000, 7320000, 4),
        (7320000, 7400000, 7),
        (7400000, 7750000, 5),
        (7750000, 7754000, 7),
        (7754000, 7764000, 5),
        (7764000, 7765000, 7),
        (7765000, 7770000, 5),
        (7770000, 7783000, 7),
        (7783000, 7900000, 5),
        (7900000, 8000000, 4),
        (8000000, 8385000, 5),
        (8385000, 8672000, 5),
        (8672000, 8676000, 4),
        (8676000, 8698000, 5),
        (8698000, 9160000, 6),
        (9160000, 9165060, 7),
        (9165060, 9168700, 6),
        (9168700, 9169080, 7),
        (9169080, 9196000, 6),
        (9196000, 9196550, 7),
        (9196550, 9730000, 6),
        (9730000, 9878000, 4),
        (9878000, 9990000, 6),
        (9990000, 10000000, 7),
    )),
    ('978-2', 'French language', (
        (0, 2000000, 2),
        (2000000, 3500000, 3),
        (3500000, 4000000, 5),
        (4000000, 7000000, 3),
        (7000000, 8400000, 4),
        (8400000, 9000000, 5),
        (9000000, 9198000, 6),
        (9198000, 9198100, 5),
        (9198100, 9199430, 6),
        (9199430, 9199690, 7),
        (9199690, 9500000, 6),
        (9500000, 10000000, 7),
    )),
    ('978-3', 'German language', (
        (0, 300000, 2),
        (300000, 340000, 3),
        (340000, 370000, 4),
        (370000, 400000, 5),
        (400000, 2000000, 2),
        (2000000, 7000000, 3),
        (7000000, 8500000, 4),
        (8500000, 9000000, 5),
        (9000000, 9500000, 6),
        (9500000, 9540000, 7),
        (9540000, 9700000, 5),
        (9700000, 9850000, 4),
        (9850000, 10000000, 5),
    )),
    ('978-4', 'Japan', (
        (0, 2000000, 2),
        (2000000, 7000000, 3),
        (7000000, 8500000, 4),
        (8500000, 9000000, 5),
        (9000000, 9500000, 6),
        (9500000, 10000000, 7),
    )),
    ('978-80', 'former Czechoslovakia', (
        (0, 2000000, 2),
        (2000000, 7000000, 3),
        (7000000, 8500000, 4),
        (8500000, 9000000, 5),
        (9000000, 9990000, 6),
        (9990000, 10000000, 0),
    )),
    ('978-85', 'Brazil', (
        (0, 2000000, 2),
        (2000000, 4550000, 3),
        (4550000, 4553000, 6),
        (4553000, 4560000, 5),
        (4560000, 5290000, 3),
        (5290000, 5320000, 5),
        (5320000, 5340000, 4),
        (5340000, 5400000, 3),
        (5400000, 6000000, 4),
        (6000000, 7000000, 5),
        (7000000, 8500000, 4),
        (8500000, 9000000, 5),
        (9000000, 9250000, 6),
        (9250000, 9450000, 5),
        (9450000, 9600000, 4),
        (9600000, 9800000, 2),
        (9800000, 10000000, 5),
    )),
    ('978-89', 'Korea, Republic', (
        (0, 2500000, 2),
        (2500000, 5500000, 3),
        (5500000, 8500000, 4),
        (8500000, 9500000, 5),
        (9500000, 9700000, 6),
        (9700000, 9900000, 5),
        (9900000, 10000000, 3),
    )),
    ('978-960', 'Greece', (
        (0, 2000000, 2),
        (2000000, 6600000, 3),
        (6600000, 6900000, 4),
        (6900000, 7000000, 3),
        (7000000, 8500000, 4),
        (8500000, 9300000, 5),
        (9300000, 9400000, 2),
        (9400000, 9800000, 4),
        (9800000, 10000000, 5),
    )),
    ('978-626', 'Taiwan', (
        (0, 500000, 2),
        (500000, 3000000, 3),
        (3000000, 5000000, 4),
        (5000000, 8000000, 0),
        (8000000, 9500000, 0),
        (9500000, 10000000, 5),
    )),
    ('978-9971', 'Singapore', (
        (0, 6000000, 1),
        (6000000, 9000000, 2),
        (9000000, 9900000, 3),
        (9900000, 10000000, 4),
    )),
    ('978-99921', 'Qatar', (
        (0, 2000000, 1),
        (2000000, 7000000, 2),
        (7000000, 8000000, 3),
        (8000000, 9000000, 1),
        (9000000, 10000000, 2),
    )),
    ('979-8', 'United States', (
        (0, 2000000, 0),
        (2000000, 2300000, 3),
        (2300000, 3500000, 0),
        (3500000, 4000000, 4),
        (4000000, 8500000, 4),
        (8500000, 8850000, 5),
        (8850000, 9000000, 6),
        (9000000, 9850000, 0),
        (9850000, 10000000, 7),
    )),
    ('979-10', 'France', (
        (0, 2000000, 2),
        (2000000, 7000000, 3),
        (7000000, 9000000, 4),
        (9000000, 9760000, 5),
        (9760000, 10000000, 6),
    )),
    ('979-11', 'Korea, Republic', (
        (0, 2500000, 2),
        (2500000, 5500000, 3),
        (5500000, 8500000, 4),
        (8500000, 9500000, 5),
        (9500000, 10000000, 6),
    )),
    ('979-12', 'Italy', (
        (0, 2000000, 0),
        (2000000, 3000000, 3),
        (3000000, 5450000, 0),
        (5450000, 6000000, 4),
        (6000000, 8000000, 0),
        (8000000, 8500000, 5),
        (8500000, 10000000, 0),
    )),
)
