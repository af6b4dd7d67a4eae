name = "dynreg"
version = "0.3.0"
author = "Dynreg Contributors"
homepage = "https://github.com/dynreg/dynreg"
default_user_agent = f"{name}/{version} (+{homepage})"
