# -*- coding: utf-8 -*-
import uvicorn

from saju_lotto import config

if __name__ == "__main__":
    uvicorn.run("saju_lotto.main:app", host="0.0.0.0", port=config.PORT)
