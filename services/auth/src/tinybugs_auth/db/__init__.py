"""数据库访问支持。"""
