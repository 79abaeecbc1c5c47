"""数据访问层: Query 组装与落库,不 commit."""
