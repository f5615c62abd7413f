AUTHORIZATION_SCHEME = "WECHATPAY2-SHA256-RSA2048"


def build_authorization_header(merchant_id: str, nonce: str, timestamp: str, serial_no: str, signature: str) -> str:
    # field order is what the gateway parser expects, values are not escaped
    return (
        f'{AUTHORIZATION_SCHEME} '
        f'mchid="{merchant_id}",'
        f'nonce_str="{nonce}",'
        f'timestamp="{timestamp}",'
        f'serial_no="{serial_no}",'
        f'signature="{signature}"'
    )
