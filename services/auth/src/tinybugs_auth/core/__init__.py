"""核心配置、常量与日志。"""
