"""
齿轮箱价格表数据（2024年价格清单）

Static reference data for the pricing catalog:
- PRICE_LIST: ordered gearbox records (model, list price, factory discount %)
- DISCOUNT_RATE_MAP: series prefix → discount fraction, with a 'default' key
- SPECIAL_DISCOUNT_RATES: full model string → discount fraction, checked first

Rates in DISCOUNT_RATE_MAP / SPECIAL_DISCOUNT_RATES are fractions (0.16 = 16%).
Rates in PRICE_LIST are percentages (16 = 16%).
"""

SPECIAL_APPROVAL = '报告特批'

# =========================
# ① 前缀下浮比例
# =========================
DISCOUNT_RATE_MAP = {
    # HC系列
    'HC': 0.16,
    'HCD': 0.16,
    'HCT': 0.16,
    'HCW': 0.08,

    # 特定型号覆盖
    'HC600': 0.12,
    'HCD600': 0.12,
    'HCT600': 0.12,
    'HC800': 0.08,
    'HCD800': 0.08,
    'HC1000': 0.06,  # HC1000及以上
    'HCD1000': 0.06,
    'HCT1000': 0.06,
    'HCT1100': 0.06,
    'HCW1100': 0.06,
    'HCT1200': 0.06,
    'HC1400': 0.06,
    'HCD1400': 0.06,
    'HCT1400': 0.06,
    'HCW1400': 0.06,

    # HCL系列
    'HCL': 0.12,

    # GWC系列
    'GWC': 0.10,

    # DT系列
    'DT': 0.10,

    # MB系列
    'MB': 0.12,

    # 特殊型号
    '40A': 0.16,
    '120C': 0.12,
    '120B': 0.12,
    '135': 0.16,
    '135A': 0.16,
    '300': 0.16,
    'J300': 0.22,
    'D300A': 0.16,
    'T300': 0.16,

    'default': 0.10,
}

# =========================
# ② 特殊型号下浮比例（精确匹配）
# =========================
SPECIAL_DISCOUNT_RATES = {
    'J300': 0.22,
    'D300A (4-5.5:1)': 0.22,
    'HC400': 0.22,
    'HCD400A': 0.22,
    'HC1200': 0.22,
    'HC1200/1': 0.10,
}

# =========================
# ③ 齿轮箱价格清单
# =========================
PRICE_LIST = [
    # HC系列
    dict(model='40A', base_price=8560, discount_rate=16),
    dict(model='120B', base_price=12520, discount_rate=12),
    dict(model='120C', base_price=13420, discount_rate=12),
    dict(model='135', base_price=18360, discount_rate=16),
    dict(model='135A', base_price=19200, discount_rate=16),
    dict(model='HC138', base_price=18200, discount_rate=16),
    dict(model='HCD138', base_price=19400, discount_rate=16),
    dict(model='300(1.87-3:1)', base_price=23000, discount_rate=16),
    dict(model='300 (3.5-4:1)', base_price=23600, discount_rate=16),
    dict(model='300 (4.5-5.5:1)', base_price=24150, discount_rate=16),
    dict(model='J300', base_price=26680, discount_rate=22, notes=SPECIAL_APPROVAL),
    dict(model='HC300 (1.5-4.61)', base_price=24600, discount_rate=16),
    dict(model='HC300 (4.94-5.44)', base_price=25600, discount_rate=16),
    dict(model='D300A (4-5.5:1)', base_price=32420, discount_rate=22, notes=SPECIAL_APPROVAL),
    dict(model='D300A (6-7.5:1)', base_price=34520, discount_rate=16),
    dict(model='T300', base_price=43900, discount_rate=16),
    dict(model='T300/1', base_price=46900, discount_rate=16),
    dict(model='HC400', base_price=32150, discount_rate=22, notes=SPECIAL_APPROVAL),
    dict(model='HCD400A', base_price=38150, discount_rate=22, notes=SPECIAL_APPROVAL),
    dict(model='HCT400A', base_price=51000, discount_rate=16),
    dict(model='HCT400A/1', base_price=60000, discount_rate=16),
    dict(model='HC600A', base_price=57200, discount_rate=12),
    dict(model='HCD600A', base_price=60600, discount_rate=12),
    dict(model='HCT600A', base_price=70900, discount_rate=12),
    dict(model='HCT600A/1', base_price=75000, discount_rate=12),
    dict(model='HCD800', base_price=86100, discount_rate=8),
    dict(model='HCT800', base_price=98000, discount_rate=8),
    dict(model='HCT800/1', base_price=137200, discount_rate=8),
    dict(model='HCT800/2', base_price=150200, discount_rate=8),
    dict(model='HCT800/3', base_price=170800, discount_rate=8),
    dict(model='HCW800', base_price=173900, discount_rate=8),
    dict(model='HC1000', base_price=81200, discount_rate=6),
    dict(model='HCD1000', base_price=89800, discount_rate=6),
    dict(model='HCT1100', base_price=128960, discount_rate=6),
    dict(model='HCW1100', base_price=257500, discount_rate=6),
    dict(model='HC1200', base_price=92000, discount_rate=14, notes=SPECIAL_APPROVAL),
    dict(model='HC1200/1', base_price=108200, discount_rate=10, notes=SPECIAL_APPROVAL),
    dict(model='HCT1200', base_price=143000, discount_rate=6),
    dict(model='HCT1200/1', base_price=157000, discount_rate=6),
    dict(model='HCT1280/2', base_price=165000, discount_rate=6),
    dict(model='HCD1400', base_price=139000, discount_rate=6),
    dict(model='HCT1400', base_price=162500, discount_rate=6),
    dict(model='HCT1400/2', base_price=205000, discount_rate=6),
    dict(model='HCW1400', base_price=204000, discount_rate=6),
    dict(model='HC1600', base_price=150000, discount_rate=6),
    dict(model='HCD1600', base_price=165400, discount_rate=6),
    dict(model='HCT1600', base_price=194800, discount_rate=6),
    dict(model='HCT1600/1', base_price=223000, discount_rate=6),
    dict(model='HC2000', base_price=180000, discount_rate=6),
    dict(model='HCD2000', base_price=206000, discount_rate=6),
    dict(model='HCT2000', base_price=238000, discount_rate=6),
    dict(model='HCT2000/1', base_price=280000, discount_rate=6),
    dict(model='HC2700', base_price=230000, discount_rate=6),
    dict(model='HCD2700', base_price=280800, discount_rate=6),
    dict(model='HCT2700', base_price=340000, discount_rate=6),
    dict(model='HCT2700/1', base_price=390000, discount_rate=6),

    # HCL系列
    dict(model='HCL30', base_price=5320, discount_rate=12),
    dict(model='HCL100', base_price=6760, discount_rate=12),
    dict(model='HCL250', base_price=8800, discount_rate=12),
    dict(model='HCL320', base_price=9100, discount_rate=12),
    dict(model='HCL600', base_price=21600, discount_rate=12),

    # GWC系列
    dict(model='GWC28.30(2-6:1)', base_price=72500, discount_rate=10),
    dict(model='GWC30.32(2-6:1)', base_price=90800, discount_rate=10),
    dict(model='GWC32.35(2-6:1)', base_price=103800, discount_rate=10),
    dict(model='GWC36.39(2-6:1)', base_price=123800, discount_rate=10),
    dict(model='GWC39.41(2-6:1)', base_price=153800, discount_rate=10),
    dict(model='GWC42.45(2-6:1)', base_price=185800, discount_rate=10),
    dict(model='GWC45.49(2-6:1)', base_price=275800, discount_rate=10),
    dict(model='GWC45.52(2-6:1)', base_price=320000, discount_rate=10),
    dict(model='GWC49.54(2-6:1)', base_price=402600, discount_rate=10),
    dict(model='GWC49.59(2-6:1)', base_price=460000, discount_rate=10),
    dict(model='GWC49.59A(2-6:1)带PT', base_price=495000, discount_rate=10),
    dict(model='GWC52.59(2-6:1)', base_price=545000, discount_rate=10),
    dict(model='GWC52.59A(2-6:1)滑动', base_price=575000, discount_rate=10),
    dict(model='GWC52.62(2-6:1)', base_price=575000, discount_rate=10),
    dict(model='GWC60.66(2-6:1)', base_price=800000, discount_rate=10),
    dict(model='GWC60.66A(2-6:1)滑动', base_price=830000, discount_rate=10),
    dict(model='GWC60.74(2-6:1)', base_price=920000, discount_rate=10),
    dict(model='GWC60.74B(2-6:1)带PT', base_price=1010000, discount_rate=10),
    dict(model='GWC63.71(2-6:1)', base_price=950000, discount_rate=10),
    dict(model='GWC63.71(2-6:1)带PTO', base_price=1030000, discount_rate=10),
    dict(model='GWC66.75(2-6:1)', base_price=1050000, discount_rate=10),
    dict(model='GWC70.76(2-6:1)', base_price=1100000, discount_rate=10),
    dict(model='GWC70.76C(2-6:1)带PT', base_price=1150000, discount_rate=10),
    dict(model='GWC70.85(2-6:1)', base_price=1620000, discount_rate=10),
    dict(model='GWC70.85A(2-6:1)带PT', base_price=1670000, discount_rate=10),
    dict(model='GWC75.90(2-6:1)', base_price=1800000, discount_rate=10),
    dict(model='GWC75.90(2-6:1)带PTO', base_price=1850000, discount_rate=10),
    dict(model='GWC78.88(2-6:1)', base_price=1670000, discount_rate=10),
    dict(model='GWC78.88A(2-6:1)带PT', base_price=1740000, discount_rate=10),

    # MB系列
    dict(model='MB170', base_price=10950, discount_rate=12),
    dict(model='MB242', base_price=21300, discount_rate=12),
    dict(model='MB270A (3-5.5:1)', base_price=28600, discount_rate=12),
    dict(model='MB270A (6-7:1)', base_price=30000, discount_rate=12),

    # DT系列
    dict(model='DT180', base_price=23000, discount_rate=10),
    dict(model='DT210', base_price=35000, discount_rate=10),
    dict(model='DT240', base_price=39000, discount_rate=10),
    dict(model='DT280', base_price=45000, discount_rate=10),
    dict(model='DT580', base_price=52000, discount_rate=10),
    dict(model='DT770', base_price=58000, discount_rate=10),
    dict(model='DT900', base_price=63000, discount_rate=10),
    dict(model='DT1400', base_price=100000, discount_rate=10),
    dict(model='DT1500', base_price=120000, discount_rate=10),
    dict(model='DT2400', base_price=155000, discount_rate=10),
    dict(model='DT4300', base_price=175000, discount_rate=10),
]
