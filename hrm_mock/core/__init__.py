"""核心层：存储、路径解析、路由表、状态机、错误信封。无业务资源逻辑。"""
