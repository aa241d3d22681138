import logging
from dataclasses import dataclass, fields

from blis.json_data import load_data

DEFAULT_CONFIG_PATH = "blis.json"


@dataclass
class Config:
    """
    运行配置，对应配置文件中的同名字段
    """
    # 交互模式的提示符
    prompt: str = ">> "
    # 按天轮转的日志文件，为空时不写文件
    log_file: str = "blis.log"
    log_level: str = "INFO"
    # WebSocket 服务监听地址
    host: str = "localhost"
    port: int = 3001


def load_config(file_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """
    从JSON文件加载配置，文件中没有的字段使用默认值

    Args:
        file_path: 配置文件路径

    Returns:
        配置对象
    """
    data = load_data(file_path)
    config = Config()
    known = {field.name for field in fields(Config)}

    for key, value in data.items():
        if key not in known:
            logging.warning(f"忽略未知的配置项: {key}")
            continue
        expected = int if key == "port" else str
        if not isinstance(value, expected) or isinstance(value, bool):
            logging.warning(f"配置项 {key} 的值 {value!r} 类型错误，使用默认值")
            continue
        if key == "log_level":
            value = value.upper()
            # 未知的日志级别会让 logging.basicConfig 报错
            if not isinstance(logging.getLevelName(value), int):
                logging.warning(f"未知的日志级别 {value!r}，使用默认值")
                continue
        setattr(config, key, value)

    return config
