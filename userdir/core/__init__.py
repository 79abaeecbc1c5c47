"""共享内核: 异常、类型与纯计算逻辑(不依赖 Flask)."""
