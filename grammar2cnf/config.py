"""
Configuration loader for the grammar conversion tool.
"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv


DEFAULT_CONFIG: Dict[str, Any] = {
    'logging': {
        'level': 'INFO',
        'format': "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}",
        'log_file': None,
        'rotation': '10 MB',
        'retention': '7 days',
    },
    'io': {
        'encoding': 'utf-8',
    },
    'transform': {
        'terminal_prefix': 'C',
        'chain_prefix': 'D',
    },
}


class Config:
    """Configuration manager for the application."""
    
    def __init__(self, config_path: str = None):
        """Initialize configuration."""
        if config_path is None:
            config_path = Path(__file__).parent.parent / "config" / "config.yaml"
        
        # Load environment variables
        load_dotenv()
        
        self.config = self._merge(DEFAULT_CONFIG, {})
        if Path(config_path).is_file():
            with open(config_path, 'r') as f:
                self.config = self._merge(self.config, yaml.safe_load(f) or {})
        
        # Override with environment variables where applicable
        self._load_env_overrides()
    
    @staticmethod
    def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two nested dictionaries, values from override win."""
        merged = {}
        for key, value in base.items():
            merged[key] = dict(value) if isinstance(value, dict) else value
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = Config._merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    
    def _load_env_overrides(self):
        """Load environment variable overrides."""
        if os.getenv('GRAMMAR2CNF_LOG_LEVEL'):
            self.config['logging']['level'] = os.getenv('GRAMMAR2CNF_LOG_LEVEL')
        
        if os.getenv('GRAMMAR2CNF_LOG_FILE'):
            self.config['logging']['log_file'] = os.getenv('GRAMMAR2CNF_LOG_FILE')
        
        if os.getenv('GRAMMAR2CNF_ENCODING'):
            self.config['io']['encoding'] = os.getenv('GRAMMAR2CNF_ENCODING')
    
    def get(self, key_path: str, default=None):
        """Get configuration value using dot notation (e.g., 'transform.chain_prefix')."""
        keys = key_path.split('.')
        value = self.config
        
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# Global configuration instance
config = Config()
