"""Message helpers shared by POD service modules"""


def invalid_config_param(module_name: str) -> str:
    """Message for a module that received invalid config parameters"""
    return f"Invalid Config Parameters. Module: {module_name}"
