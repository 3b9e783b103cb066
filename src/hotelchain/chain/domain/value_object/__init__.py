from .chain_name import ChainName as ChainName
