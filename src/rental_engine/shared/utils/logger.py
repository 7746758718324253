from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None, child: bool = False) -> Logger:
    """Powertools Logger を返す

    service_name を省略すると POWERTOOLS_SERVICE_NAME が使われる。
    ユースケース層では child=True でハンドラのロガー設定を引き継ぐ。
    """
    return Logger(service=service_name, child=child)
