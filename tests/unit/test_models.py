"""
单元测试：请求/响应模型

测试 camelCase 字段别名、毫秒时间戳序列化以及枚举。
"""

import pytest
from datetime import datetime, timezone


class TestShipModels:
    """Ship 相关模型单元测试"""

    def test_ship_type_values(self):
        """测试 ShipType 枚举"""
        from hangar.models import ShipType

        assert ShipType("TRANSPORT") is ShipType.TRANSPORT
        assert ShipType("MILITARY") is ShipType.MILITARY
        assert ShipType("MERCHANT") is ShipType.MERCHANT
        assert len(ShipType) == 3

    def test_create_request_uses_camel_case(self, payload_factory):
        """测试 CreateShipRequest 按 camelCase 解析"""
        from hangar.models import CreateShipRequest, ShipType

        request = CreateShipRequest(**payload_factory())
        assert request.name == "Orion III"
        assert request.ship_type is ShipType.MERCHANT
        assert request.is_used is True
        assert request.crew_size == 617
        assert isinstance(request.prod_date, int)

    def test_create_request_ignores_id_and_rating(self, payload_factory):
        """测试客户端传入的 id 和 rating 会被忽略"""
        from hangar.models import CreateShipRequest

        request = CreateShipRequest(**payload_factory(id=42, rating=99.9))
        assert not hasattr(request, "rating")
        assert "id" not in request.model_dump()

    def test_create_request_rejects_unknown_ship_type(self, payload_factory):
        """测试未知船型被拒绝"""
        from hangar.models import CreateShipRequest
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            CreateShipRequest(**payload_factory(shipType="YACHT"))

    def test_update_request_all_optional(self):
        """测试 UpdateShipRequest 所有字段都可省略"""
        from hangar.models import UpdateShipRequest

        request = UpdateShipRequest()
        assert request.model_dump(exclude_none=True) == {}

        request = UpdateShipRequest(**{"isUsed": False})
        assert request.is_used is False

    def test_ship_response_serializes_prod_date_as_millis(self, ship_factory):
        """测试 ShipResponse 输出 camelCase 且 prodDate 为毫秒时间戳"""
        from hangar.models import ShipResponse

        ship = ship_factory(7, prod_date=datetime(3000, 1, 1, tzinfo=timezone.utc))
        data = ShipResponse.model_validate(ship).model_dump(by_alias=True)

        assert data["id"] == 7
        assert data["shipType"] == "MERCHANT"
        assert data["isUsed"] is False
        assert data["crewSize"] == 100
        assert data["prodDate"] == int(datetime(3000, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)

    def test_ship_response_naive_prod_date(self, ship_factory):
        """测试无时区的 prodDate 按 UTC 序列化"""
        from hangar.models import ShipResponse

        ship = ship_factory(1, prod_date=datetime(1970, 1, 1, 0, 0, 1))
        data = ShipResponse.model_validate(ship).model_dump(by_alias=True)
        assert data["prodDate"] == 1000

    def test_ship_filter_defaults(self):
        """测试 ShipFilter 默认不设置任何条件"""
        from hangar.models import ShipFilter

        assert ShipFilter().model_dump(exclude_none=True) == {}
