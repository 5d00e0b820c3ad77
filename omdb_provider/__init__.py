"""omdb-provider — OMDb 影片数据源 + 本地影片资源"""

__version__ = "0.1.0"
# 由发布流程写入
__commit__ = ""
