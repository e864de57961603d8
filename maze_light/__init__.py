"""带光源放置的随机迷宫生成实验代码包。

子模块：
- grid: 二维网格、坐标与格子状态
- adjacency: 距离为 step 的上下左右 / 对角邻居查询
- boundary: 入口 / 出口标记
- light: 单个光源的覆盖范围
- universe: 需照亮点集 U 的建模与覆盖率统计
- maps: 完整生成流程与尺度预设
- render: 字符画 / 图片输出
- algorithms: 随机 Prim 挖迷宫 / 贪心光源放置
- eval: 统一评估与制图
"""

__all__ = [
    "grid",
    "adjacency",
    "boundary",
    "light",
    "universe",
    "maps",
    "render",
    "algorithms",
    "eval",
]
