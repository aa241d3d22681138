import json
import os
import logging


def load_data(file_path: str) -> dict[str, any]:
    """
    从指定JSON文件加载数据

    Args:
        file_path: 数据文件路径

    Returns:
        加载的数据字典，文件不存在、无法读取或内容不是对象时返回空字典
    """
    if not os.path.exists(file_path):
        logging.debug(f"数据文件 {file_path} 不存在")
        return {}
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logging.error(f"加载数据文件 {file_path} 时出错: {e}")
        return {}
    if not isinstance(data, dict):
        logging.error(f"数据文件 {file_path} 的内容不是JSON对象")
        return {}
    return data


def parse_object(text: str) -> dict[str, any] or None:
    """
    把文本解析为JSON对象，不是JSON对象时返回 None
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
