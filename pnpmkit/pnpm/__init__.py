from .pnpm import Pnpm
