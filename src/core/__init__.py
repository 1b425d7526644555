"""
Core: арифметика целых произвольной точности.

Содержит примитивы над магнитудами (math), сущность BigInt и её
сериализуемую запись (domain), а также JSON Schema контракты (contracts).
"""
