# create_tables.py

from app.db import Base, engine, init_models

print("正在创建所有数据库表...")

# 先导入所有模型，确保元数据已注册
init_models()

Base.metadata.create_all(bind=engine)

print("所有数据库表创建完成！")
