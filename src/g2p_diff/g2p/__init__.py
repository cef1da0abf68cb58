#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
语音合成前端的G2P（Grapheme-to-Phoneme）流水线
提供文本到音素序列的转换，供比较器使用
"""

import inspect
import logging
from typing import Dict, List, Type

from ..errors import InitializationError
from .base_g2p import BaseG2P
from .char_g2p import CharPinyinG2P
from .word_g2p import WordPinyinG2P

logger = logging.getLogger(__name__)

G2P_REGISTRY: Dict[str, Type[BaseG2P]] = {
    CharPinyinG2P.name: CharPinyinG2P,
    WordPinyinG2P.name: WordPinyinG2P,
}


def available_g2p() -> List[str]:
    return sorted(G2P_REGISTRY)


def create_g2p(name: str, **options) -> BaseG2P:
    """按名称创建G2P流水线

    Args:
        name: 流水线名称，见 available_g2p()
        **options: 传给流水线构造函数的参数，值为None或该流水线不接受的参数会被忽略

    Returns:
        G2P实例

    Raises:
        InitializationError: 未知名称或初始化失败
    """
    try:
        cls = G2P_REGISTRY[name]
    except KeyError:
        raise InitializationError(
            f"未知的G2P流水线: {name}，可选: {', '.join(available_g2p())}"
        ) from None

    # 只传递该流水线构造函数接受的参数
    accepted = inspect.signature(cls.__init__).parameters
    ignored = sorted(k for k, v in options.items() if v is not None and k not in accepted)
    if ignored:
        logger.debug(f"{name}: 忽略不适用的参数 {ignored}")
    options = {k: v for k, v in options.items() if v is not None and k in accepted}
    try:
        return cls(**options)
    except InitializationError:
        raise
    except TypeError as e:
        raise InitializationError(f"{name}: 参数错误: {e}") from e


__all__ = ['BaseG2P', 'CharPinyinG2P', 'WordPinyinG2P', 'G2P_REGISTRY', 'available_g2p', 'create_g2p']
