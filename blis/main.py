import argparse
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from typing import Callable, List, Optional

from blis import __version__
from blis.config import Config, DEFAULT_CONFIG_PATH, load_config
from blis.errors import ParseError
from blis.message import format_result
from blis.parser import Parser
from blis.server import run_server

QUIT_COMMAND = "quit"


def setup_logging(config: Config) -> None:
    log_format = "%(asctime)s - %(levelname)s - %(message)s"

    # 控制台只输出警告以上的日志，避免打断交互
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    handlers: List[logging.Handler] = [console_handler]

    if config.log_file:
        # 创建一个按天轮转的日志处理器，保留所有日志
        timed_handler = TimedRotatingFileHandler(
            filename=config.log_file,
            when='midnight',
            interval=1,
            backupCount=0,  # 设置为0表示不删除旧日志文件
            encoding='utf-8'
        )
        handlers.append(timed_handler)

    logging.basicConfig(level=config.log_level, format=log_format, handlers=handlers, force=True)


def print_banner() -> None:
    print(f"blis {__version__}")
    print(f"Simple arithmetic calculator. Just type expression and hit Enter. Type \"{QUIT_COMMAND}\" to exit.")
    print("Example: (2+2)*5 - (-3+2.1)/(25*3.1415) + 0.0001")


def evaluate_line(parser: Parser, expression: str) -> str:
    """
    计算一行输入，返回要显示给用户的文本
    """
    try:
        return format_result(parser.calculate(expression))
    except ParseError as e:
        logging.info(f"表达式 {expression!r} 计算失败: {e.kind} ({e})")
        return e.message


def run_console(config: Config, read_line: Callable[[str], str] = input) -> None:
    """
    交互模式：逐行读取表达式并输出结果，输入 quit 退出
    """
    print_banner()
    parser = Parser()
    logging.info("交互模式已启动")

    while True:
        try:
            expression = read_line(f"\n{config.prompt}")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if expression.strip() == QUIT_COMMAND:
            break

        print(evaluate_line(parser, expression))

    print("...bye")
    logging.info("交互模式已退出")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="blis", description="Simple arithmetic calculator")
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="配置文件路径")
    ap.add_argument("--version", action="version", version=f"blis {__version__}")
    ap.add_argument("command", nargs="?", choices=["console", "serve"], default="console",
                    help="console: 交互模式（默认）; serve: 启动 WebSocket 计算服务")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    setup_logging(config)

    if args.command == "serve":
        run_server(config)
    else:
        run_console(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
