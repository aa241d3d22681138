import asyncio
import logging
import signal

import websockets
from websockets.exceptions import ConnectionClosed

from blis.config import Config
from blis.errors import ParseError
from blis.json_data import parse_object
from blis.message import ResultMessage, ValueMessage, ErrorMessage, send_message
from blis.parser import Parser


def evaluate_message(parser: Parser, text: str) -> ResultMessage:
    """
    计算一条消息中的表达式

    消息可以是表达式本身，也可以是 {"expression": "...", "echo": "..."} 形式的JSON对象

    Args:
        parser: 当前连接使用的求值器
        text: 收到的文本消息

    Returns:
        计算结果或错误信息
    """
    expression = text
    echo = None

    request = parse_object(text)
    if request is not None and isinstance(request.get("expression"), str):
        expression = request["expression"]
        if "echo" in request:
            echo = request["echo"]
            if echo is not None:
                echo = str(echo)

    try:
        return ValueMessage(expression, parser.calculate(expression), echo)
    except ParseError as e:
        logging.info(f"表达式 {expression!r} 计算失败: {e.kind} ({e})")
        return ErrorMessage(expression, e, echo)


async def receive_messages(ws):
    # 每个连接使用独立的求值器，求值器不能被多个连接共享
    parser = Parser()
    while True:
        try:
            message = await ws.recv()
            if not isinstance(message, str):
                logging.warning("忽略二进制消息")
                continue

            logging.info(f"收到表达式: {message}")
            await send_message(ws, evaluate_message(parser, message))

        except ConnectionClosed:
            logging.info("WebSocket 连接已关闭")
            break
        except Exception as e:
            logging.error(f"发生未知错误: {e}")


def stop_on_signal(signum, frame):
    logging.info(f"收到信号 {signum}，准备退出...")
    raise SystemExit(0)


async def serve(config: Config, stop_event: asyncio.Event or None = None):
    """
    启动 WebSocket 计算服务，直到 stop_event 被设置
    """
    if stop_event is None:
        stop_event = asyncio.Event()

    async with websockets.serve(receive_messages, config.host, config.port):
        logging.info(f"WebSocket 服务已启动: ws://{config.host}:{config.port}")
        await stop_event.wait()

    logging.info("WebSocket 服务已关闭")


def run_server(config: Config) -> None:
    signal.signal(signal.SIGTERM, stop_on_signal)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logging.info("WebSocket 服务已关闭")
