#!/usr/bin/env python
"""
g2p-diff 命令行入口
"""
import logging
from pathlib import Path

import click

from . import __version__
from .config import CompareSettings
from .corpus import clean_aozora, extract_vvproj
from .errors import CorpusError, InitializationError, InputReadError
from .g2p import available_g2p, create_g2p
from .preprocessing import SentenceSegmenter
from .report import ConsoleReporter
from .runner import ComparisonRunner
from .utils.logging_config import configure_logging

logger = logging.getLogger("g2p_diff")


@click.group()
@click.version_option(__version__, prog_name="g2p-diff")
def cli():
    """比较两条G2P流水线的音素输出"""
    pass


@cli.command("compare")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--pipeline-a", "-a", default=None, help="流水线A (参照)，默认读取 G2P_DIFF_PIPELINE_A")
@click.option("--pipeline-b", "-b", default=None, help="流水线B (被测)，默认读取 G2P_DIFF_PIPELINE_B")
@click.option("--delimiters", default=None, help="句末标点集合")
@click.option("--encoding", default=None, help="输入文件编码")
@click.option("--user-dict", default=None, type=click.Path(dir_okay=False), help="jieba用户词典")
@click.option("--jieba-dict", default=None, type=click.Path(dir_okay=False), help="jieba主词典")
@click.option("--color/--no-color", default=None, help="是否着色输出，默认根据终端自动判断")
@click.option("--debug", is_flag=True, help="输出调试日志")
def compare_command(files, pipeline_a, pipeline_b, delimiters, encoding, user_dict, jieba_dict, color, debug):
    """逐句比较 FILES 中文本的音素输出"""
    settings = CompareSettings.from_env()
    if pipeline_a:
        settings.pipeline_a = pipeline_a
    if pipeline_b:
        settings.pipeline_b = pipeline_b
    if delimiters:
        settings.delimiters = delimiters
    if encoding:
        settings.encoding = encoding
    if user_dict:
        settings.user_dict = user_dict
    if jieba_dict:
        settings.jieba_dict = jieba_dict
    if color is not None:
        settings.color = "always" if color else "never"

    configure_logging(
        logging.DEBUG if debug else settings.log_level,
        debug_modules=['g2p_diff.runner'] if debug else None,
    )
    logger.info(f"流水线A: {settings.pipeline_a}, 流水线B: {settings.pipeline_b}")

    try:
        pipelines = [
            create_g2p(name, dictionary=settings.jieba_dict, user_dict=settings.user_dict)
            for name in (settings.pipeline_a, settings.pipeline_b)
        ]
    except InitializationError as e:
        raise click.ClickException(f"流水线初始化失败: {e}")

    runner = ComparisonRunner(
        pipelines[0],
        pipelines[1],
        segmenter=SentenceSegmenter(settings.delimiters),
        reporter=ConsoleReporter(settings.pipeline_a, settings.pipeline_b, color=settings.color_flag),
        encoding=settings.encoding,
    )
    try:
        runner.run(files)
    except InputReadError as e:
        raise click.ClickException(str(e))


@cli.command("list-pipelines")
def list_pipelines():
    """列出可用的G2P流水线"""
    for name in available_g2p():
        click.echo(name)


@cli.command("extract-vvproj")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
def extract_vvproj_command(files):
    """从 VOICEVOX 工程文件抽取台词为 .txt"""
    for path in files:
        try:
            destination = extract_vvproj(path)
        except CorpusError as e:
            raise click.ClickException(str(e))
        click.echo(f"{path} -> {destination}")


@cli.command("clean-aozora")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--encoding", default="cp932", help="原始文件编码")
def clean_aozora_command(files, encoding):
    """清洗青空文库原始文本 (*.raw.txt -> *.txt)"""
    for path in files:
        try:
            destination = clean_aozora(path, encoding=encoding)
        except CorpusError as e:
            raise click.ClickException(str(e))
        click.echo(f"{path} -> {destination}")


def main():
    cli()


if __name__ == "__main__":
    main()
