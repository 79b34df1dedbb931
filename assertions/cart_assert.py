from collections import Counter


class CartAssert:
    """购物车相关断言：角标、商品行"""

    @staticmethod
    def badge_matches_rows(badge_count: int, row_count: int):
        assert badge_count == row_count, f"角标数量{badge_count}与购物车行数{row_count}不一致"

    @staticmethod
    def same_products(expected: list[str], actual: list[str], where: str = "购物车页"):
        """两边商品集合一致（允许顺序不同，重复加购按次数比较）"""
        missing = Counter(expected) - Counter(actual)
        extra = Counter(actual) - Counter(expected)
        assert not missing, f"{where}缺少商品：{sorted(missing)}"
        assert not extra, f"{where}多出商品：{sorted(extra)}"
