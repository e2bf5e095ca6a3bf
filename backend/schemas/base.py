def success_response(data=None, message="success"):
    # 快速构造成功响应
    return {"code": 0, "message": message, "data": data}


def error_response(code: int, message: str, data=None):
    # 快速构造错误响应
    return {"code": code, "message": message, "data": data}
