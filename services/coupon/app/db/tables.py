from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, Numeric, String, Table

metadata = MetaData()

# 시각 컬럼은 KST 벽시계 시각(naive)으로 저장
coupons = Table(
    "coupons",
    metadata,
    Column("coupon_id", Integer, primary_key=True, autoincrement=True),
    Column("code", String(6), nullable=False),
    Column("description", String(255), nullable=False),
    Column("discount_value", Numeric(19, 2), nullable=False),
    Column("expiration_date", DateTime, nullable=False),
    Column("published", Boolean, nullable=False, default=False),
    Column("deleted", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
)
