#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
语料准备工具

- VOICEVOX 工程文件 (.vvproj) 抽取台词文本
- 青空文库 (Aozora Bunko) Shift_JIS (cp932) 原始文本清洗
"""

import re
import json
import logging
from pathlib import Path
from typing import List, Union

from .errors import CorpusError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# 清洗规则，按顺序执行
AOZORA_PATTERNS = [
    (re.compile(r"［＃[０-９]+字下げ］.+$", re.M), ""),  # 缩进注记到行尾
    (re.compile(r"｜"), ""),                           # 注音起始符
    (re.compile(r"［.+?］"), ""),                      # 其他注记
    (re.compile(r"《.+?》"), ""),                      # 注音
    (re.compile(r".+-\n\n", re.S), ""),                # 开头的说明部分
    (re.compile(r"底本：.+", re.S), ""),               # 结尾的底本信息
]


def vvproj_lines(project: dict) -> List[str]:
    """按 audioKeys 顺序取出每条台词，补上句号"""
    try:
        talk = project["talk"]
        items = talk["audioItems"]
        return [f"{items[key]['text']}。" for key in talk["audioKeys"]]
    except (KeyError, TypeError) as e:
        raise CorpusError(f"VOICEVOX工程文件格式错误: {e}") from e


def extract_vvproj(path: PathLike) -> Path:
    """从 .vvproj 抽取文本，写入同名 .txt 文件

    Args:
        path: .vvproj 文件路径

    Returns:
        输出文件路径
    """
    path = Path(path)
    destination = path.with_suffix(".txt")
    if destination == path:
        raise CorpusError(f"输出文件与输入文件相同: {path}")

    try:
        project = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CorpusError(f"无法读取 {path}: {e}") from e

    destination.write_text("\n".join(vvproj_lines(project)), encoding="utf-8")
    logger.info(f"{path} -> {destination}")
    return destination


def clean_aozora_text(content: str) -> str:
    """清洗青空文库文本中的注音、注记、说明与底本信息"""
    content = content.replace("\r\n", "\n")
    for pattern, replacement in AOZORA_PATTERNS:
        content = pattern.sub(replacement, content)
    return content


def clean_aozora(path: PathLike, encoding: str = "cp932") -> Path:
    """清洗青空文库原始文件，以UTF-8写入去掉 .raw 的路径

    Args:
        path: 原始文件路径，如 foo.raw.txt
        encoding: 原始文件编码，cp932 兼容 Shift_JIS 并包含①、髙等扩展字符

    Returns:
        输出文件路径
    """
    path = Path(path)
    destination = path.with_name(path.name.replace(".raw", ""))
    if destination == path:
        raise CorpusError(f"输出文件与输入文件相同: {path}")

    try:
        content = path.read_bytes().decode(encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"无法读取 {path}: {e}") from e

    destination.write_bytes(clean_aozora_text(content).encode("utf-8"))
    logger.info(f"{path} -> {destination}")
    return destination
