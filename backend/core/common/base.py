# 版本号
VERSION = "1.0.0"

# API接口前缀
API_BASE = "/api/v1"
