"""数据模型模块.

主要模型:
- User: 用户目录记录
"""

__all__ = ["User"]


def __getattr__(name: str):
    """延迟加载模型, 避免初始化周期引发的循环导入."""
    if name not in __all__:
        msg = f"module 'userdir.models' has no attribute {name}"
        raise AttributeError(msg)

    from importlib import import_module

    module_map = {
        "User": "userdir.models.user",
    }

    module = import_module(module_map[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
