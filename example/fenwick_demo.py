# -*- coding: utf-8 -*-
from bitree.data.fenwick import FenwickTree

if __name__ == "__main__":
    ft = FenwickTree([1, 6, 2, 4, 3, 5])
    print(f"sum(0, 5)={ft.prefix_sum()}")  # 1 + 6 + 2 + 4 + 3 + 5 = 21
    print(f"sum(0, 3)={ft.prefix_sum(3)}")  # 1 + 6 + 2 + 4 = 13
    print(f"sum(3, 4)={ft.range_sum(3, 4)}")  # 4 + 3 = 7
    ft.update(3, 3, -1)  # array[3] += -1
    print(f"sum(3, 4)={ft.range_sum(3, 4)}")  # 3 + 3 = 6

    print(ft)
