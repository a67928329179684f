import pytest
from youtube_transcript_api.proxies import GenericProxyConfig, WebshareProxyConfig

from yt_transcriber.errors import InvalidProxy
from yt_transcriber.utils import make_proxy, make_session


def test_make_proxy_http():
    cfg = make_proxy("http://user:pw@1.2.3.4:8080")
    assert isinstance(cfg, GenericProxyConfig)
    assert cfg.http_url == "http://user:pw@1.2.3.4:8080"
    assert cfg.https_url == "https://user:pw@1.2.3.4:8080"


def test_make_proxy_socks_untouched():
    cfg = make_proxy("socks5://1.2.3.4:1080")
    assert cfg.http_url == cfg.https_url == "socks5://1.2.3.4:1080"


def test_make_proxy_webshare():
    cfg = make_proxy("webshare://alice:secret")
    assert isinstance(cfg, WebshareProxyConfig)
    assert cfg.proxy_username == "alice"
    assert cfg.proxy_password == "secret"


def test_make_session_sets_user_agent():
    session = make_session("test-agent/1.0")
    assert session.headers["User-Agent"] == "test-agent/1.0"


@pytest.mark.parametrize("url", ["webshare://nocolon", "ws://:secret", "webshare://alice:"])
def test_make_proxy_rejects_incomplete_webshare(url):
    with pytest.raises(InvalidProxy):
        make_proxy(url)
