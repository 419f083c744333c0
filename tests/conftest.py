"""
Hangar 测试配置

包含通用的 pytest fixtures 和配置。
"""

import os

# 测试使用内存 SQLite，必须在导入 hangar 之前设置
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient


# ============================================================================
# pytest 标记注册
# ============================================================================

def pytest_configure(config):
    """注册自定义标记"""
    config.addinivalue_line(
        "markers", "integration: 集成测试，通过 HTTP 接口访问完整应用"
    )
    config.addinivalue_line(
        "markers", "unit: 单元测试，不需要外部依赖"
    )


# ============================================================================
# 通用工具
# ============================================================================

def epoch_millis(year: int, month: int = 6, day: int = 15) -> int:
    """返回指定日期 (UTC) 的毫秒时间戳"""
    return int(datetime(year, month, day, tzinfo=timezone.utc).timestamp() * 1000)


def ship_payload(**overrides) -> dict:
    """构造一个合法的创建请求体，可覆盖任意字段"""
    payload = {
        "name": "Orion III",
        "planet": "Mars",
        "shipType": "MERCHANT",
        "prodDate": epoch_millis(2995),
        "isUsed": True,
        "speed": 0.82,
        "crewSize": 617,
    }
    payload.update(overrides)
    return payload


def make_ship(ship_id=None, **overrides):
    """构造一个内存中的 Ship 对象（不入库）"""
    from hangar.models import Ship, ShipType

    fields = {
        "id": ship_id,
        "name": "Orion III",
        "planet": "Mars",
        "ship_type": ShipType.MERCHANT,
        "prod_date": datetime(2995, 6, 15, tzinfo=timezone.utc),
        "is_used": False,
        "speed": 0.5,
        "crew_size": 100,
        "rating": 1.6,
    }
    fields.update(overrides)
    return Ship(**fields)


# ============================================================================
# 通用 fixtures
# ============================================================================

@pytest.fixture
def client():
    """启动应用（包含 lifespan），每个测试使用一个全新的内存数据库"""
    from hangar.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def payload_factory():
    """返回构造创建请求体的工厂函数"""
    return ship_payload


@pytest.fixture
def ship_factory():
    """返回构造内存 Ship 对象的工厂函数"""
    return make_ship


@pytest.fixture
def millis():
    """返回毫秒时间戳工具函数"""
    return epoch_millis
